"""
FastAPI router for registration and login.

All routes delegate to use cases. No business logic here.
"""

from fastapi import APIRouter, Depends

from terra_discover.application.accounts.dtos import LoginCommand, RegisterUserCommand
from terra_discover.application.accounts.login_user import LoginUserUseCase
from terra_discover.application.accounts.register_user import RegisterUserUseCase
from terra_discover.interfaces.accounts.dependencies import (
    get_login_user_use_case,
    get_register_user_use_case,
)
from terra_discover.interfaces.accounts.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from terra_discover.interfaces.schemas import ErrorResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Register a user",
    description="Create an account and return a bearer token for it.",
)
def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> AuthResponse:
    """Register a new user."""
    result = use_case.execute(
        RegisterUserCommand(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )
    return AuthResponse(token=result.token, message=result.message, user_id=result.user_id)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Log in",
    description="Exchange an email and password for a bearer token.",
)
def login(
    request: LoginRequest,
    use_case: LoginUserUseCase = Depends(get_login_user_use_case),
) -> AuthResponse:
    """Log a user in."""
    result = use_case.execute(LoginCommand(email=request.email, password=request.password))
    return AuthResponse(token=result.token, message=result.message, user_id=result.user_id)
