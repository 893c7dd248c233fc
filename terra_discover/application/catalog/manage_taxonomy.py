"""
Use cases: CRUD for types, categories and features.

Each use case is built with the TaxonomyRepository of one kind, so the
same classes serve all three taxonomies.
Failure cases: TaxonomyNotFoundError, TaxonomyNameConflictError,
    UnexpectedError on other persistence failures (including deleting
    a type that spaces still use).
"""

import logging

from terra_discover.application.catalog.dtos import (
    CreateTaxonomyCommand,
    UpdateTaxonomyCommand,
)
from terra_discover.application.error_mapping import translate_persistence_error
from terra_discover.domain.catalog.entities import TaxonomyChanges, TaxonomyTerm
from terra_discover.domain.catalog.errors import (
    TaxonomyNameConflictError,
    TaxonomyNotFoundError,
)
from terra_discover.domain.catalog.ports import TaxonomyRepository
from terra_discover.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


class _TaxonomyUseCase:
    def __init__(self, repo: TaxonomyRepository) -> None:
        self._repo = repo

    def _require(self, term_id: str) -> TaxonomyTerm:
        term = self._repo.get_by_id(term_id)
        if term is None:
            raise TaxonomyNotFoundError(self._repo.kind, term_id)
        return term


class ListTaxonomyTermsUseCase(_TaxonomyUseCase):
    """Returns every term of one taxonomy."""

    def execute(self) -> list[TaxonomyTerm]:
        return self._repo.list_all()


class GetTaxonomyTermUseCase(_TaxonomyUseCase):
    """Returns one term by ID."""

    def execute(self, term_id: str) -> TaxonomyTerm:
        return self._require(term_id)


class CreateTaxonomyTermUseCase(_TaxonomyUseCase):
    """Creates a term. Names are unique within a taxonomy."""

    def execute(self, command: CreateTaxonomyCommand) -> TaxonomyTerm:
        try:
            term = self._repo.add(command.name, command.description)
        except PersistenceError as exc:
            raise translate_persistence_error(
                exc, conflict=TaxonomyNameConflictError(self._repo.kind)
            ) from exc

        logger.info("Created %s id=%s name=%s", self._repo.kind.label, term.id, term.name)
        return term


class UpdateTaxonomyTermUseCase(_TaxonomyUseCase):
    """Applies a partial update to a term."""

    def execute(self, command: UpdateTaxonomyCommand) -> TaxonomyTerm:
        self._require(command.term_id)
        changes = TaxonomyChanges(name=command.name, description=command.description)
        try:
            term = self._repo.update(command.term_id, changes)
        except PersistenceError as exc:
            raise translate_persistence_error(
                exc,
                conflict=TaxonomyNameConflictError(self._repo.kind),
                not_found=TaxonomyNotFoundError(self._repo.kind, command.term_id),
            ) from exc

        logger.info("Updated %s id=%s", self._repo.kind.label, term.id)
        return term


class DeleteTaxonomyTermUseCase(_TaxonomyUseCase):
    """Deletes a term. Referential policy is left to the store."""

    def execute(self, term_id: str) -> None:
        self._require(term_id)
        try:
            self._repo.delete(term_id)
        except PersistenceError as exc:
            raise translate_persistence_error(exc) from exc

        logger.info("Deleted %s id=%s", self._repo.kind.label, term_id)
