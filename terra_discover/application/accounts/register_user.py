"""
Use case: Register a new user.

Input: RegisterUserCommand (username, email, password)
Output: AuthResult
Side effects: Inserts one user row.
Failure cases: EmailAlreadyRegisteredError, UsernameAlreadyRegisteredError,
    UnexpectedError.
"""

import logging

from terra_discover.application.accounts.dtos import AuthResult, RegisterUserCommand
from terra_discover.application.error_mapping import translate_persistence_error
from terra_discover.domain.accounts.entities import NewUser
from terra_discover.domain.accounts.errors import (
    EmailAlreadyRegisteredError,
    UsernameAlreadyRegisteredError,
)
from terra_discover.domain.accounts.ports import PasswordHasher, TokenService, UserRepository
from terra_discover.domain.errors import ConflictError, PersistenceError

logger = logging.getLogger(__name__)

AVATAR_URL_TEMPLATE = (
    "https://api.dicebear.com/9.x/adventurer-neutral/svg?seed={username}&size=64"
)
DEFAULT_BIO = "about me"


class RegisterUserUseCase:
    """Orchestrates account creation and issues the first token."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = password_hasher
        self._tokens = token_service

    def execute(self, command: RegisterUserCommand) -> AuthResult:
        """Run the register user use case.

        Args:
            command: The new account's username, email and password.

        Returns:
            Token and ID of the new user.
        """
        if self._user_repo.get_by_email(command.email) is not None:
            raise EmailAlreadyRegisteredError()
        if self._user_repo.get_by_username(command.username) is not None:
            raise UsernameAlreadyRegisteredError()

        new_user = NewUser(
            username=command.username,
            email=command.email,
            password_hash=self._hasher.hash(command.password),
            profile_picture=AVATAR_URL_TEMPLATE.format(username=command.username),
            bio=DEFAULT_BIO,
        )
        try:
            user = self._user_repo.add(new_user)
        except PersistenceError as exc:
            raise translate_persistence_error(
                exc, conflict=ConflictError("Email or username already registered.")
            ) from exc

        logger.info("Registered user id=%s", user.id)
        return AuthResult(
            token=self._tokens.issue(user.id, user.email),
            message="Registration successful.",
            user_id=user.id,
        )
