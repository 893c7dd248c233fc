"""
Domain entities for the accounts bounded context.

They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """A registered user. Only the author of a space may change it."""

    id: str
    username: str
    email: str
    password_hash: str
    created_at: datetime
    profile_picture: Optional[str] = None
    bio: Optional[str] = None


@dataclass(frozen=True)
class NewUser:
    """Data needed to insert a user."""

    username: str
    email: str
    password_hash: str
    profile_picture: Optional[str] = None
    bio: Optional[str] = None


@dataclass(frozen=True)
class AuthenticatedUser:
    """The trusted caller identity handed to the catalog core."""

    id: str
    username: str
    email: str


@dataclass(frozen=True)
class TokenClaims:
    """Verified claims carried by an access token."""

    user_id: str
    email: str
