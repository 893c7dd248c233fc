"""
Use case: Create a space.

Input: CreateSpaceCommand
Output: Space (categories and features as name lists)
Side effects: Inserts one space row and its join rows in one transaction.
Failure cases: InvalidSpaceError, ReferencesNotFoundError,
    RelatedRecordsNotFoundError, SlugConflictError, UnexpectedError.
"""

import logging

from terra_discover.application.catalog.dtos import CreateSpaceCommand
from terra_discover.application.catalog.slug_writes import write_with_slug_retry
from terra_discover.domain.catalog.entities import NewSpace, Space, TaxonomyKind
from terra_discover.domain.catalog.errors import InvalidSpaceError
from terra_discover.domain.catalog.ports import SpaceRepository
from terra_discover.domain.catalog.reference_validator import ReferenceValidator
from terra_discover.domain.catalog.slug_generator import SlugGenerator

logger = logging.getLogger(__name__)


class CreateSpaceUseCase:
    """Orchestrates space creation.

    Validates the name and every reference before any write, derives a
    unique slug, normalizes the description and persists the space with
    its type, categories, features and author in a single write.
    """

    def __init__(
        self,
        space_repo: SpaceRepository,
        reference_validator: ReferenceValidator,
        slug_generator: SlugGenerator,
        slug_conflict_retries: int = 1,
    ) -> None:
        self._space_repo = space_repo
        self._validator = reference_validator
        self._slugs = slug_generator
        self._slug_conflict_retries = slug_conflict_retries

    def execute(self, command: CreateSpaceCommand) -> Space:
        """Run the create space use case.

        Args:
            command: The new space's data and its author.

        Returns:
            The persisted space.
        """
        if not command.name or not command.name.strip():
            raise InvalidSpaceError("name must not be empty")

        self._validator.validate_type(command.type_id)
        self._validator.validate(TaxonomyKind.CATEGORY, command.category_ids)
        self._validator.validate(TaxonomyKind.FEATURE, command.feature_ids)

        def write(slug: str) -> Space:
            return self._space_repo.add(self._build(command, slug))

        space = write_with_slug_retry(
            write,
            slug=self._slugs.ensure_unique_slug(command.name),
            regenerate=lambda: self._slugs.ensure_unique_slug(command.name),
            retries=self._slug_conflict_retries,
        )

        logger.info(
            "Created space id=%s slug=%s author=%s",
            space.id,
            space.slug,
            space.submitted_by_id,
        )
        return space

    @staticmethod
    def _build(command: CreateSpaceCommand, slug: str) -> NewSpace:
        return NewSpace(
            name=command.name,
            slug=slug,
            description=command.description or "",
            type_id=command.type_id,
            submitted_by_id=command.author_id,
            alternate_names=list(command.alternate_names),
            activities=list(command.activities),
            historical_context=command.historical_context,
            architectural_style=command.architectural_style,
            operating_hours=command.operating_hours,
            entrance_fee=command.entrance_fee,
            contact_info=command.contact_info,
            accessibility=command.accessibility,
            category_ids=list(dict.fromkeys(command.category_ids or [])),
            feature_ids=list(dict.fromkeys(command.feature_ids or [])),
        )
