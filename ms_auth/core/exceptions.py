"""Error taxonomy raised by the authentication core.

Transports (HTTP routes, CLI) catch AuthError and map each subclass to
their own status codes; the core never deals in HTTP.
"""

from typing import Any


class AuthError(Exception):
    """Base class for every failure the auth core reports to callers."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(AuthError):
    """A required field is missing or out of bounds."""


class ConflictError(AuthError):
    """The username is already taken."""


class NotFoundError(AuthError):
    """No user with the given username or id."""


class InvalidCredentialsError(AuthError):
    """The password does not match the stored hash."""


class TokenInvalidError(AuthError):
    """Token missing, malformed, or signed with another key."""


class TokenExpiredError(AuthError):
    """Token signature is valid but its validity window has passed."""


class StoreUnavailableError(AuthError):
    """The credential store failed; details carry the driver message."""
