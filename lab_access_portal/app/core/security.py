"""
Administrator credential check.

The portal has a single administrator whose username and password
are configured as shared secrets (see ``Settings``).  Both values are
compared in constant time so response timing does not reveal how much
of a guess was correct.
"""

import hmac
import logging
from typing import Optional

from .config import Settings
from .errors import AuthError

logger = logging.getLogger(__name__)


def _equals(supplied: Optional[str], expected: str) -> bool:
    if supplied is None:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def verify_admin(username: Optional[str], password: Optional[str], config: Settings) -> bool:
    """Return ``True`` if the pair matches the configured credentials."""
    # Evaluate both comparisons so a wrong username costs the same as a wrong password
    user_ok = _equals(username, config.admin_username)
    password_ok = _equals(password, config.admin_password)
    return user_ok and password_ok


def require_admin(username: Optional[str], password: Optional[str], config: Settings) -> None:
    """Raise ``AuthError`` unless the credentials are valid."""
    if not verify_admin(username, password, config):
        logger.warning("Rejected admin credentials for username %r", username)
        raise AuthError("Invalid credentials")
