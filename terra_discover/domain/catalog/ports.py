"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.

Every write method either succeeds or raises one of
UniqueViolationError, RelatedRecordMissingError or PersistenceError.
"""

from abc import ABC, abstractmethod
from typing import Optional

from terra_discover.domain.catalog.entities import (
    NewSpace,
    Space,
    SpaceChanges,
    TaxonomyChanges,
    TaxonomyKind,
    TaxonomyTerm,
)


class SpaceRepository(ABC):
    """Port for persisting and retrieving spaces."""

    @abstractmethod
    def list_all(self) -> list[Space]:
        """Return every space."""
        raise NotImplementedError

    @abstractmethod
    def list_by_author(self, user_id: str) -> list[Space]:
        """Return the spaces submitted by one user."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, space_id: str) -> Optional[Space]:
        """Return a space by its immutable ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_by_identifier(self, identifier: str) -> Optional[Space]:
        """Return the space whose ID or slug equals ``identifier``.

        An ID match takes precedence over a slug match.
        """
        raise NotImplementedError

    @abstractmethod
    def slug_exists(self, slug: str) -> bool:
        """Return True if any space already uses ``slug``."""
        raise NotImplementedError

    @abstractmethod
    def add(self, space: NewSpace) -> Space:
        """Insert a space together with its relations in one transaction."""
        raise NotImplementedError

    @abstractmethod
    def update(self, space_id: str, changes: SpaceChanges) -> Optional[Space]:
        """Apply a partial update and bump ``updated_at``.

        Set relation ID lists replace the existing association entirely.

        Returns:
            None if no row had that ID when the update ran.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, space_id: str) -> bool:
        """Delete a space. Join rows are removed by the store.

        Returns:
            False if no row had that ID when the delete ran.
        """
        raise NotImplementedError


class TaxonomyRepository(ABC):
    """Port for one taxonomy kind (types, categories or features)."""

    @property
    @abstractmethod
    def kind(self) -> TaxonomyKind:
        """Which taxonomy this repository serves."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[TaxonomyTerm]:
        """Return every term of this kind."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, term_id: str) -> Optional[TaxonomyTerm]:
        """Return a term by ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_existing_ids(self, term_ids: list[str]) -> set[str]:
        """Return the subset of ``term_ids`` that exist, in one batched read."""
        raise NotImplementedError

    @abstractmethod
    def add(self, name: str, description: Optional[str]) -> TaxonomyTerm:
        """Insert a new term."""
        raise NotImplementedError

    @abstractmethod
    def update(self, term_id: str, changes: TaxonomyChanges) -> TaxonomyTerm:
        """Apply a partial update to a term."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, term_id: str) -> None:
        """Delete a term."""
        raise NotImplementedError
