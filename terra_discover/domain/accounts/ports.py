"""
Port interfaces (ABCs) for the accounts bounded context.

Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from terra_discover.domain.accounts.entities import NewUser, TokenClaims, User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return a user by ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return a user by email, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        """Return a user by username, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_by_identifier(self, identifier: str) -> Optional[User]:
        """Return the user whose email or username equals ``identifier``."""
        raise NotImplementedError

    @abstractmethod
    def add(self, user: NewUser) -> User:
        """Insert a user."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of ``password``."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``."""
        raise NotImplementedError


class TokenService(ABC):
    """Port for issuing and verifying access tokens."""

    @abstractmethod
    def issue(self, user_id: str, email: str) -> str:
        """Return a signed access token for a user."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """Return the claims of a valid token.

        Raises:
            InvalidTokenError: If the token is malformed, tampered or expired.
        """
        raise NotImplementedError
