"""
Pydantic schemas for authentication and user endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from terra_discover.domain.accounts.entities import User
from terra_discover.interfaces.schemas import CamelModel

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MAX_LEN = 72


class RegisterRequest(CamelModel):
    """Request schema for registration.

    Attributes:
        username: Public handle (3-50 chars, unique).
        email: Login email (unique).
        password: Plain password (8-72 chars; bcrypt reads at most 72 bytes).
    """

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=PASSWORD_MAX_LEN)


class LoginRequest(CamelModel):
    """Request schema for login."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=PASSWORD_MAX_LEN)


class AuthResponse(CamelModel):
    """Response schema for login and registration."""

    token: str
    message: str
    user_id: str


class UserResponse(CamelModel):
    """Public profile of a user. Never carries the password hash."""

    id: str
    username: str
    email: str
    profile_picture: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            profile_picture=user.profile_picture,
            bio=user.bio,
            created_at=user.created_at,
        )
