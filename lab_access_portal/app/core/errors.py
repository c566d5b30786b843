"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these exceptions; ``main.create_app`` registers a
handler that turns each one into a JSON ``{"error": message}`` body
with the exception's ``status_code``.
"""

from fastapi import status


class PortalError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PortalError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(PortalError):
    """The email already has an active request."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(PortalError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(PortalError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(PortalError):
    """Reading or writing the data file failed.

    The message is for the server log only; clients receive a generic
    "Internal server error".
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
