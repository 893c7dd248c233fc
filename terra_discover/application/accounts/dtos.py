"""
Data Transfer Objects for the accounts application layer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering a new user."""

    username: str
    email: str
    password: str


@dataclass(frozen=True)
class LoginCommand:
    """Input DTO for logging in with email and password."""

    email: str
    password: str


@dataclass(frozen=True)
class AuthResult:
    """Output DTO for a successful login or registration.

    Attributes:
        token: Signed bearer token.
        message: Human-readable outcome.
        user_id: ID of the authenticated user.
    """

    token: str
    message: str
    user_id: str
