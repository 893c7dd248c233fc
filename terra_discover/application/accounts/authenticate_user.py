"""
Use case: Resolve a bearer token into the calling user.

Input: raw token string (None when the header is missing or malformed)
Output: AuthenticatedUser
Side effects: None.
Failure cases: MissingCredentialsError, AuthenticationError.
"""

import logging
from typing import Optional

from terra_discover.domain.accounts.entities import AuthenticatedUser
from terra_discover.domain.accounts.errors import (
    AuthenticationError,
    InvalidTokenError,
    MissingCredentialsError,
)
from terra_discover.domain.accounts.ports import TokenService, UserRepository

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """Verifies a token and checks that its user still exists."""

    def __init__(self, user_repo: UserRepository, token_service: TokenService) -> None:
        self._user_repo = user_repo
        self._tokens = token_service

    def execute(self, token: Optional[str]) -> AuthenticatedUser:
        if not token:
            raise MissingCredentialsError()

        try:
            claims = self._tokens.verify(token)
        except InvalidTokenError as exc:
            logger.warning("Rejected bearer token: %s", exc)
            reason = "Token expired." if exc.expired else "Invalid token."
            raise AuthenticationError(reason) from exc

        user = self._user_repo.get_by_id(claims.user_id)
        if user is None:
            raise AuthenticationError("User not found.")

        return AuthenticatedUser(id=user.id, username=user.username, email=user.email)
