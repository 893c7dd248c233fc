"""
Use case: Log in with email and password.

Input: LoginCommand
Output: AuthResult
Side effects: None.
Failure cases: InvalidCredentialsError.
"""

import logging

from terra_discover.application.accounts.dtos import AuthResult, LoginCommand
from terra_discover.domain.accounts.errors import InvalidCredentialsError
from terra_discover.domain.accounts.ports import PasswordHasher, TokenService, UserRepository

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Checks credentials and issues a token.

    Unknown emails and wrong passwords fail with the same error.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = password_hasher
        self._tokens = token_service

    def execute(self, command: LoginCommand) -> AuthResult:
        user = self._user_repo.get_by_email(command.email)
        if user is None or not self._hasher.verify(command.password, user.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info("User id=%s logged in", user.id)
        return AuthResult(
            token=self._tokens.issue(user.id, user.email),
            message="Login successful.",
            user_id=user.id,
        )
