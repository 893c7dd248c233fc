"""
FastAPI router for spaces.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from terra_discover.application.catalog.create_space import CreateSpaceUseCase
from terra_discover.application.catalog.delete_space import DeleteSpaceUseCase
from terra_discover.application.catalog.dtos import (
    CreateSpaceCommand,
    DeleteSpaceCommand,
    UpdateSpaceCommand,
)
from terra_discover.application.catalog.get_spaces import GetSpaceUseCase, ListSpacesUseCase
from terra_discover.application.catalog.update_space import UpdateSpaceUseCase
from terra_discover.domain.accounts.entities import AuthenticatedUser
from terra_discover.interfaces.accounts.dependencies import get_current_user
from terra_discover.interfaces.catalog.dependencies import (
    get_create_space_use_case,
    get_delete_space_use_case,
    get_list_spaces_use_case,
    get_space_use_case,
    get_update_space_use_case,
)
from terra_discover.interfaces.catalog.schemas import (
    CreateSpaceRequest,
    SpaceResponse,
    UpdateSpaceRequest,
)
from terra_discover.interfaces.schemas import ErrorResponse

router = APIRouter(prefix="/spaces", tags=["spaces"])

WRITE_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=list[SpaceResponse],
    summary="List spaces",
)
def list_spaces(
    use_case: ListSpacesUseCase = Depends(get_list_spaces_use_case),
) -> list[SpaceResponse]:
    return [SpaceResponse.from_entity(space) for space in use_case.execute()]


@router.get(
    "/{identifier}",
    response_model=SpaceResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a space",
    description="Look a space up by its ID or its slug.",
)
def get_space(
    identifier: str,
    use_case: GetSpaceUseCase = Depends(get_space_use_case),
) -> SpaceResponse:
    return SpaceResponse.from_entity(use_case.execute(identifier))


@router.post(
    "",
    response_model=SpaceResponse,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERRORS,
    summary="Create a space",
    description="Create a space authored by the caller. The slug is derived from the name.",
)
def create_space(
    request: CreateSpaceRequest,
    caller: AuthenticatedUser = Depends(get_current_user),
    use_case: CreateSpaceUseCase = Depends(get_create_space_use_case),
) -> SpaceResponse:
    """Create a space for the authenticated caller."""
    command = CreateSpaceCommand(author_id=caller.id, **request.model_dump())
    return SpaceResponse.from_entity(use_case.execute(command))


@router.patch(
    "/{identifier}",
    response_model=SpaceResponse,
    responses={**WRITE_ERRORS, 403: {"model": ErrorResponse}},
    summary="Update a space",
    description=(
        "Partially update a space by ID or slug. Only the author may update it. "
        "Sent relation ID lists replace the current set."
    ),
)
def update_space(
    identifier: str,
    request: UpdateSpaceRequest,
    caller: AuthenticatedUser = Depends(get_current_user),
    use_case: UpdateSpaceUseCase = Depends(get_update_space_use_case),
) -> SpaceResponse:
    """Apply only the keys present in the request body."""
    command = UpdateSpaceCommand(
        caller_id=caller.id,
        identifier=identifier,
        **request.model_dump(exclude_unset=True),
    )
    return SpaceResponse.from_entity(use_case.execute(command))


@router.delete(
    "/{space_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete a space",
)
def delete_space(
    space_id: str,
    caller: AuthenticatedUser = Depends(get_current_user),
    use_case: DeleteSpaceUseCase = Depends(get_delete_space_use_case),
) -> Response:
    use_case.execute(DeleteSpaceCommand(caller_id=caller.id, space_id=space_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
