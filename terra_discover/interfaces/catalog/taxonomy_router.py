"""
FastAPI routers for the three space taxonomies.

Types, categories and features expose the same CRUD surface, so one
factory builds a router per TaxonomyKind.
"""

from typing import Callable

from fastapi import APIRouter, Depends

from terra_discover.application.catalog.dtos import (
    CreateTaxonomyCommand,
    UpdateTaxonomyCommand,
)
from terra_discover.application.catalog.manage_taxonomy import (
    CreateTaxonomyTermUseCase,
    DeleteTaxonomyTermUseCase,
    GetTaxonomyTermUseCase,
    ListTaxonomyTermsUseCase,
    UpdateTaxonomyTermUseCase,
)
from terra_discover.domain.accounts.entities import AuthenticatedUser
from terra_discover.domain.catalog.entities import TaxonomyKind
from terra_discover.domain.catalog.ports import TaxonomyRepository
from terra_discover.interfaces.accounts.dependencies import get_current_user
from terra_discover.interfaces.catalog.dependencies import taxonomy_repository_dependency
from terra_discover.interfaces.catalog.schemas import (
    CreateTaxonomyRequest,
    TaxonomyTermResponse,
    UpdateTaxonomyRequest,
)
from terra_discover.interfaces.schemas import ErrorResponse, MessageResponse


def _use_case_dependency(use_case_cls: type, get_repo: Callable) -> Callable:
    def build(repo: TaxonomyRepository = Depends(get_repo)):
        return use_case_cls(repo)

    return build


def build_taxonomy_router(kind: TaxonomyKind, prefix: str, tag: str) -> APIRouter:
    """Build the CRUD router for one taxonomy kind.

    Args:
        kind: Which taxonomy the routes manage.
        prefix: Path prefix, e.g. ``/types``.
        tag: OpenAPI tag for the routes.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    get_repo = taxonomy_repository_dependency(kind)
    label = kind.label

    @router.get(
        "",
        response_model=list[TaxonomyTermResponse],
        summary=f"List {tag}",
    )
    def list_terms(
        use_case: ListTaxonomyTermsUseCase = Depends(
            _use_case_dependency(ListTaxonomyTermsUseCase, get_repo)
        ),
    ) -> list[TaxonomyTermResponse]:
        return [TaxonomyTermResponse.from_entity(term) for term in use_case.execute()]

    @router.get(
        "/{term_id}",
        response_model=TaxonomyTermResponse,
        responses={404: {"model": ErrorResponse}},
        summary=f"Get a {label.lower()}",
    )
    def get_term(
        term_id: str,
        use_case: GetTaxonomyTermUseCase = Depends(
            _use_case_dependency(GetTaxonomyTermUseCase, get_repo)
        ),
    ) -> TaxonomyTermResponse:
        return TaxonomyTermResponse.from_entity(use_case.execute(term_id))

    @router.post(
        "",
        response_model=TaxonomyTermResponse,
        status_code=201,
        responses={401: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
        summary=f"Create a {label.lower()}",
    )
    def create_term(
        request: CreateTaxonomyRequest,
        _caller: AuthenticatedUser = Depends(get_current_user),
        use_case: CreateTaxonomyTermUseCase = Depends(
            _use_case_dependency(CreateTaxonomyTermUseCase, get_repo)
        ),
    ) -> TaxonomyTermResponse:
        command = CreateTaxonomyCommand(name=request.name, description=request.description)
        return TaxonomyTermResponse.from_entity(use_case.execute(command))

    @router.patch(
        "/{term_id}",
        response_model=TaxonomyTermResponse,
        responses={
            401: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
            409: {"model": ErrorResponse},
        },
        summary=f"Update a {label.lower()}",
    )
    def update_term(
        term_id: str,
        request: UpdateTaxonomyRequest,
        _caller: AuthenticatedUser = Depends(get_current_user),
        use_case: UpdateTaxonomyTermUseCase = Depends(
            _use_case_dependency(UpdateTaxonomyTermUseCase, get_repo)
        ),
    ) -> TaxonomyTermResponse:
        command = UpdateTaxonomyCommand(
            term_id=term_id, **request.model_dump(exclude_unset=True)
        )
        return TaxonomyTermResponse.from_entity(use_case.execute(command))

    @router.delete(
        "/{term_id}",
        response_model=MessageResponse,
        responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        summary=f"Delete a {label.lower()}",
    )
    def delete_term(
        term_id: str,
        _caller: AuthenticatedUser = Depends(get_current_user),
        use_case: DeleteTaxonomyTermUseCase = Depends(
            _use_case_dependency(DeleteTaxonomyTermUseCase, get_repo)
        ),
    ) -> MessageResponse:
        use_case.execute(term_id)
        return MessageResponse(message=f"{label} deleted successfully.")

    return router


types_router = build_taxonomy_router(TaxonomyKind.TYPE, "/types", "types")
categories_router = build_taxonomy_router(TaxonomyKind.CATEGORY, "/categories", "categories")
features_router = build_taxonomy_router(TaxonomyKind.FEATURE, "/features", "features")
