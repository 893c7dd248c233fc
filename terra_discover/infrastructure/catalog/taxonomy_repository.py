"""
Adapter: Taxonomy repositories.

One adapter class serves space types, categories and features;
instances differ only by the ORM model and the TaxonomyKind they carry.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from terra_discover.domain.catalog.entities import (
    TaxonomyChanges,
    TaxonomyKind,
    TaxonomyTerm,
)
from terra_discover.domain.catalog.ports import TaxonomyRepository
from terra_discover.domain.errors import PersistenceError, RelatedRecordMissingError
from terra_discover.domain.presence import is_set
from terra_discover.infrastructure.catalog.models import (
    SpaceCategoryModel,
    SpaceFeatureModel,
    SpaceTypeModel,
)
from terra_discover.infrastructure.database import translate_errors

logger = logging.getLogger(__name__)

TAXONOMY_MODELS = {
    TaxonomyKind.TYPE: SpaceTypeModel,
    TaxonomyKind.CATEGORY: SpaceCategoryModel,
    TaxonomyKind.FEATURE: SpaceFeatureModel,
}


def _to_term(model) -> TaxonomyTerm:
    return TaxonomyTerm(id=model.id, name=model.name, description=model.description)


class TaxonomyRepositoryAdapter(TaxonomyRepository):
    """Persists the terms of one taxonomy kind."""

    def __init__(self, session_factory: sessionmaker[Session], kind: TaxonomyKind) -> None:
        self._session_factory = session_factory
        self._kind = kind
        self._model = TAXONOMY_MODELS[kind]

    @property
    def kind(self) -> TaxonomyKind:
        return self._kind

    def list_all(self) -> list[TaxonomyTerm]:
        with translate_errors(), self._session_factory() as session:
            models = session.scalars(select(self._model).order_by(self._model.name)).all()
            return [_to_term(model) for model in models]

    def get_by_id(self, term_id: str) -> Optional[TaxonomyTerm]:
        with translate_errors(), self._session_factory() as session:
            model = session.get(self._model, term_id)
            return _to_term(model) if model is not None else None

    def find_existing_ids(self, term_ids: list[str]) -> set[str]:
        if not term_ids:
            return set()
        with translate_errors(), self._session_factory() as session:
            found = session.scalars(
                select(self._model.id).where(self._model.id.in_(term_ids))
            ).all()
            return set(found)

    def add(self, name: str, description: Optional[str]) -> TaxonomyTerm:
        with translate_errors(), self._session_factory.begin() as session:
            model = self._model(name=name, description=description)
            session.add(model)
            session.flush()
            return _to_term(model)

    def update(self, term_id: str, changes: TaxonomyChanges) -> TaxonomyTerm:
        with translate_errors(), self._session_factory.begin() as session:
            model = session.get(self._model, term_id)
            if model is None:
                raise RelatedRecordMissingError(f"{self._kind.label} {term_id} no longer exists")
            if is_set(changes.name):
                model.name = changes.name
            if is_set(changes.description):
                model.description = changes.description
            session.flush()
            return _to_term(model)

    def delete(self, term_id: str) -> None:
        """Delete a term.

        Category and feature links are cascaded by the store. A type that
        spaces still reference is restricted, which surfaces as a plain
        PersistenceError rather than a missing-record one.
        """
        try:
            with translate_errors(), self._session_factory.begin() as session:
                session.execute(delete(self._model).where(self._model.id == term_id))
        except RelatedRecordMissingError as exc:
            logger.warning("%s %s is still referenced", self._kind.label, term_id)
            raise PersistenceError(f"{self._kind.label} {term_id} is still referenced") from exc


def build_taxonomy_repositories(
    session_factory: sessionmaker[Session],
) -> dict[TaxonomyKind, TaxonomyRepositoryAdapter]:
    """Return one adapter per taxonomy kind, sharing a session factory."""
    return {kind: TaxonomyRepositoryAdapter(session_factory, kind) for kind in TaxonomyKind}
