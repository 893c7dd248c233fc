"""
Use case: Partially update a space.

Input: UpdateSpaceCommand (caller, id or slug, fields to change)
Output: Space
Side effects: Updates one space row and, when supplied, replaces its
    category and feature sets.
Failure cases: SpaceNotFoundError, NotSpaceAuthorError, InvalidSpaceError,
    ReferencesNotFoundError, RelatedRecordsNotFoundError,
    SlugConflictError, UnexpectedError.
"""

import logging
from typing import Any

from terra_discover.application.catalog.dtos import UpdateSpaceCommand
from terra_discover.application.catalog.slug_writes import write_with_slug_retry
from terra_discover.domain.catalog.entities import (
    SCALAR_SPACE_FIELDS,
    Space,
    SpaceChanges,
    TaxonomyKind,
)
from terra_discover.domain.catalog.errors import (
    InvalidSpaceError,
    NotSpaceAuthorError,
    SpaceNotFoundError,
)
from terra_discover.domain.catalog.ports import SpaceRepository
from terra_discover.domain.catalog.reference_validator import ReferenceValidator
from terra_discover.domain.catalog.slug_generator import SlugGenerator
from terra_discover.domain.presence import is_set

logger = logging.getLogger(__name__)


class UpdateSpaceUseCase:
    """Orchestrates a PATCH-style space update.

    Existence is checked first, authorship second, and only then any
    field validation. Fields absent from the command are never touched.
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

    def execute(self, command: UpdateSpaceCommand) -> Space:
        """Run the update space use case.

        Args:
            command: Caller, target identifier and the supplied fields.

        Returns:
            The updated space.
        """
        space = self._space_repo.find_by_identifier(command.identifier)
        if space is None:
            raise SpaceNotFoundError(command.identifier)

        if space.submitted_by_id != command.caller_id:
            logger.warning(
                "User %s tried to update space %s owned by %s",
                command.caller_id,
                space.id,
                space.submitted_by_id,
            )
            raise NotSpaceAuthorError("update")

        changes: dict[str, Any] = {
            name: getattr(command, name)
            for name in SCALAR_SPACE_FIELDS
            if is_set(getattr(command, name))
        }

        if is_set(command.name):
            if not command.name or not command.name.strip():
                raise InvalidSpaceError("name must not be empty")
            if command.name != space.name:
                changes["slug"] = self._slugs.ensure_unique_slug(command.name)

        if is_set(command.type_id):
            self._validator.validate_type(command.type_id)
            changes["type_id"] = command.type_id

        if is_set(command.category_ids):
            self._validator.validate(TaxonomyKind.CATEGORY, command.category_ids)
            changes["category_ids"] = list(dict.fromkeys(command.category_ids))

        if is_set(command.feature_ids):
            self._validator.validate(TaxonomyKind.FEATURE, command.feature_ids)
            changes["feature_ids"] = list(dict.fromkeys(command.feature_ids))

        if is_set(command.description) and command.description is None:
            changes["description"] = ""

        renamed = "slug" in changes

        def write(slug: str) -> Space:
            if renamed:
                changes["slug"] = slug
            stored = self._space_repo.update(space.id, SpaceChanges(**changes))
            if stored is None:
                # Deleted between the lookup and the write
                raise SpaceNotFoundError(space.id)
            return stored

        updated = write_with_slug_retry(
            write,
            slug=changes.get("slug", space.slug),
            regenerate=lambda: self._slugs.ensure_unique_slug(command.name),
            retries=self._slug_conflict_retries if renamed else 0,
        )

        logger.info(
            "Updated space id=%s fields=%s",
            updated.id,
            sorted(changes),
        )
        return updated
