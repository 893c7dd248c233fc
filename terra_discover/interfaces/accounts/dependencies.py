"""
Dependency injection for the accounts bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection, plus the
``get_current_user`` guard used by every protected route.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session, sessionmaker

from terra_discover.application.accounts.authenticate_user import AuthenticateUserUseCase
from terra_discover.application.accounts.list_users import ListUsersUseCase
from terra_discover.application.accounts.login_user import LoginUserUseCase
from terra_discover.application.accounts.register_user import RegisterUserUseCase
from terra_discover.core.config import settings
from terra_discover.domain.accounts.entities import AuthenticatedUser
from terra_discover.domain.accounts.ports import PasswordHasher, TokenService, UserRepository
from terra_discover.infrastructure.accounts.password_hasher import BcryptPasswordHasherAdapter
from terra_discover.infrastructure.accounts.token_service import JwtTokenServiceAdapter
from terra_discover.infrastructure.accounts.user_repository import UserRepositoryAdapter
from terra_discover.infrastructure.database import get_session_factory

bearer_scheme = HTTPBearer(auto_error=False)


def get_user_repository(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> UserRepository:
    """Build the user repository on the shared session factory."""
    return UserRepositoryAdapter(session_factory)


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasherAdapter()


def get_token_service() -> TokenService:
    return JwtTokenServiceAdapter(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.access_token_ttl_seconds,
    )


def get_register_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> RegisterUserUseCase:
    """Build RegisterUserUseCase with its infrastructure dependencies."""
    return RegisterUserUseCase(user_repo, password_hasher, token_service)


def get_login_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> LoginUserUseCase:
    """Build LoginUserUseCase with its infrastructure dependencies."""
    return LoginUserUseCase(user_repo, password_hasher, token_service)


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersUseCase:
    """Build ListUsersUseCase with its infrastructure dependencies."""
    return ListUsersUseCase(user_repo)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user_repo: UserRepository = Depends(get_user_repository),
    token_service: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """Resolve the bearer token of the request into the calling user.

    Raises:
        MissingCredentialsError: No ``Authorization: Bearer`` header.
        AuthenticationError: The token or its user cannot be trusted.
    """
    token = credentials.credentials if credentials is not None else None
    return AuthenticateUserUseCase(user_repo, token_service).execute(token)
