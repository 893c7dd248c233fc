"""
FastAPI router for public user profiles and their spaces.
"""

from fastapi import APIRouter, Depends

from terra_discover.application.accounts.list_users import ListUsersUseCase
from terra_discover.application.catalog.get_spaces import ListUserSpacesUseCase
from terra_discover.interfaces.accounts.dependencies import get_list_users_use_case
from terra_discover.interfaces.accounts.schemas import UserResponse
from terra_discover.interfaces.catalog.dependencies import get_list_user_spaces_use_case
from terra_discover.interfaces.catalog.schemas import SpaceResponse
from terra_discover.interfaces.schemas import ErrorResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    return [UserResponse.from_entity(user) for user in use_case.execute()]


@router.get(
    "/{identifier}/spaces",
    response_model=list[SpaceResponse],
    responses={404: {"model": ErrorResponse}},
    summary="List the spaces of a user",
    description="Look the user up by username or email and return the spaces they submitted.",
)
def list_user_spaces(
    identifier: str,
    use_case: ListUserSpacesUseCase = Depends(get_list_user_spaces_use_case),
) -> list[SpaceResponse]:
    return [SpaceResponse.from_entity(space) for space in use_case.execute(identifier)]
