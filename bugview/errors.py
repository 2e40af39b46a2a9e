# bugview/errors.py
"""
Error taxonomy for the gateway.

Each error knows the HTTP status it maps to and the only text a client is
ever allowed to see. The exception message itself is for the logs.
"""
from __future__ import annotations


class BugviewError(Exception):
    status_code: int = 500
    public_message: str = ""


class KeyValidationError(BugviewError):
    """The requested issue key is not of the form PROJ-123."""
    status_code = 400


class NotFoundError(BugviewError):
    """Jira has no issue with that key."""
    status_code = 404
    public_message = "Sorry, that issue does not exist.\n"


class AuthorizationError(BugviewError):
    """The issue exists but does not carry the public label."""
    status_code = 403
    public_message = "Sorry, this issue is not public.\n"


class UpstreamError(BugviewError):
    """Network failure, timeout, non-2xx or non-JSON answer from Jira."""
    status_code = 500


class FormatError(BugviewError):
    """Jira answered with JSON that lacks the fields we rely on."""
    status_code = 500
