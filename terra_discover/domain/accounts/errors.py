"""
Domain-specific errors for the accounts bounded context.

No framework imports allowed.
"""

from terra_discover.domain.errors import ConflictError, NotFoundError, UnauthorizedError


class AuthenticationError(UnauthorizedError):
    """Raised when a request carries no usable bearer token."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Authentication failed: {reason}")
        self.reason = reason


class MissingCredentialsError(UnauthorizedError):
    """Raised when the Authorization header is absent or malformed."""

    def __init__(self) -> None:
        super().__init__(
            "Authentication required: Invalid or missing Authorization header."
        )


class InvalidCredentialsError(UnauthorizedError):
    """Raised when an email/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password.")


class InvalidTokenError(Exception):
    """Raised by token services when a token cannot be trusted.

    Carries ``expired`` so the caller can report a precise reason.
    """

    def __init__(self, message: str, expired: bool = False) -> None:
        super().__init__(message)
        self.expired = expired


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering with an email that is taken."""

    def __init__(self) -> None:
        super().__init__("Email already registered.")


class UsernameAlreadyRegisteredError(ConflictError):
    """Raised when registering with a username that is taken."""

    def __init__(self) -> None:
        super().__init__("Username already registered.")


class UserNotFoundError(NotFoundError):
    """Raised when no user matches a username or email."""

    def __init__(self, identifier: str) -> None:
        super().__init__("User not found.")
        self.identifier = identifier
