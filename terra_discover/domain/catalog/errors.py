"""
Domain-specific errors for the catalog bounded context.

All errors raised from the catalog domain must be defined here.
Each one belongs to exactly one kind of the shared taxonomy.
No framework imports allowed.
"""

from terra_discover.domain.catalog.entities import TaxonomyKind
from terra_discover.domain.errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationFailedError,
)


class InvalidSpaceError(ValidationFailedError):
    """Raised when a space payload breaks a required-field rule."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid input data provided: {reason}")
        self.reason = reason


class SpaceNotFoundError(NotFoundError):
    """Raised when no space matches an id or slug."""

    def __init__(self, identifier: str) -> None:
        super().__init__("Space not found.")
        self.identifier = identifier


class ReferencesNotFoundError(NotFoundError):
    """Raised when referenced taxonomy IDs do not resolve.

    Names every missing ID, in the order the client sent them.
    """

    def __init__(self, kind: TaxonomyKind, missing_ids: list[str]) -> None:
        if kind is TaxonomyKind.TYPE:
            message = f"{kind.label} with ID '{missing_ids[0]}' not found."
        else:
            message = (
                f"One or more {kind.label} IDs not found: "
                f"{', '.join(missing_ids)}."
            )
        super().__init__(message)
        self.taxonomy_kind = kind
        self.missing_ids = list(missing_ids)


class RelatedRecordsNotFoundError(NotFoundError):
    """Raised when a related row vanished between validation and write."""

    def __init__(self) -> None:
        super().__init__(
            "One or more related records (type, category, feature) not found."
        )


class NotSpaceAuthorError(ForbiddenError):
    """Raised when a caller tries to change a space they did not submit."""

    def __init__(self, action: str) -> None:
        super().__init__(
            f"Forbidden: You do not have permission to {action} this space."
        )
        self.action = action


class SlugConflictError(ConflictError):
    """Raised when the store rejects a space because its slug is taken."""

    def __init__(self, slug: str) -> None:
        super().__init__("A space with this name or slug already exists.")
        self.slug = slug


class TaxonomyNotFoundError(NotFoundError):
    """Raised when a type, category or feature does not exist."""

    def __init__(self, kind: TaxonomyKind, term_id: str) -> None:
        super().__init__(f"{kind.label} not found.")
        self.taxonomy_kind = kind
        self.term_id = term_id


class TaxonomyNameConflictError(ConflictError):
    """Raised when a taxonomy name is already used within its kind."""

    def __init__(self, kind: TaxonomyKind) -> None:
        super().__init__(f"A {kind.label.lower()} with this name already exists.")
        self.taxonomy_kind = kind
