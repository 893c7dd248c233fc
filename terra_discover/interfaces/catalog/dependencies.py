"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the catalog context.
"""

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from terra_discover.application.catalog.create_space import CreateSpaceUseCase
from terra_discover.application.catalog.delete_space import DeleteSpaceUseCase
from terra_discover.application.catalog.get_spaces import (
    GetSpaceUseCase,
    ListSpacesUseCase,
    ListUserSpacesUseCase,
)
from terra_discover.application.catalog.update_space import UpdateSpaceUseCase
from terra_discover.core.config import settings
from terra_discover.domain.accounts.ports import UserRepository
from terra_discover.domain.catalog.entities import TaxonomyKind
from terra_discover.domain.catalog.ports import SpaceRepository, TaxonomyRepository
from terra_discover.domain.catalog.reference_validator import ReferenceValidator
from terra_discover.domain.catalog.slug_generator import SlugGenerator
from terra_discover.infrastructure.catalog.space_repository import SpaceRepositoryAdapter
from terra_discover.infrastructure.catalog.taxonomy_repository import (
    TaxonomyRepositoryAdapter,
    build_taxonomy_repositories,
)
from terra_discover.infrastructure.database import get_session_factory
from terra_discover.interfaces.accounts.dependencies import get_user_repository


def get_space_repository(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> SpaceRepository:
    """Build the space repository on the shared session factory."""
    return SpaceRepositoryAdapter(session_factory)


def get_reference_validator(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> ReferenceValidator:
    """Build a validator over all three taxonomy repositories."""
    return ReferenceValidator(build_taxonomy_repositories(session_factory).values())


def get_slug_generator(
    space_repo: SpaceRepository = Depends(get_space_repository),
) -> SlugGenerator:
    return SlugGenerator(space_repo, max_attempts=settings.slug_max_attempts)


def get_create_space_use_case(
    space_repo: SpaceRepository = Depends(get_space_repository),
    validator: ReferenceValidator = Depends(get_reference_validator),
    slug_generator: SlugGenerator = Depends(get_slug_generator),
) -> CreateSpaceUseCase:
    """Build CreateSpaceUseCase with its infrastructure dependencies."""
    return CreateSpaceUseCase(
        space_repo,
        validator,
        slug_generator,
        slug_conflict_retries=settings.slug_conflict_retries,
    )


def get_update_space_use_case(
    space_repo: SpaceRepository = Depends(get_space_repository),
    validator: ReferenceValidator = Depends(get_reference_validator),
    slug_generator: SlugGenerator = Depends(get_slug_generator),
) -> UpdateSpaceUseCase:
    """Build UpdateSpaceUseCase with its infrastructure dependencies."""
    return UpdateSpaceUseCase(
        space_repo,
        validator,
        slug_generator,
        slug_conflict_retries=settings.slug_conflict_retries,
    )


def get_delete_space_use_case(
    space_repo: SpaceRepository = Depends(get_space_repository),
) -> DeleteSpaceUseCase:
    """Build DeleteSpaceUseCase with its infrastructure dependencies."""
    return DeleteSpaceUseCase(space_repo)


def get_list_spaces_use_case(
    space_repo: SpaceRepository = Depends(get_space_repository),
) -> ListSpacesUseCase:
    return ListSpacesUseCase(space_repo)


def get_space_use_case(
    space_repo: SpaceRepository = Depends(get_space_repository),
) -> GetSpaceUseCase:
    return GetSpaceUseCase(space_repo)


def get_list_user_spaces_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    space_repo: SpaceRepository = Depends(get_space_repository),
) -> ListUserSpacesUseCase:
    return ListUserSpacesUseCase(user_repo, space_repo)


def taxonomy_repository_dependency(kind: TaxonomyKind):
    """Return a dependency that builds the repository of one taxonomy kind."""

    def get_taxonomy_repository(
        session_factory: sessionmaker[Session] = Depends(get_session_factory),
    ) -> TaxonomyRepository:
        return TaxonomyRepositoryAdapter(session_factory, kind)

    return get_taxonomy_repository
