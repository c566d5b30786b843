"""
Top-level package for the Lab Access Portal.

Students request access to a lab, an administrator approves requests
by attaching a lab URL, and students poll for their status.  All
functionality lives in the ``app`` subpackage.
"""

__all__ = []
