"""
Adapter: Space repository.

Implements SpaceRepository port on top of the SQLAlchemy ORM.
Every call runs in its own transaction; an insert or update writes the
scalar columns and both join tables together.
"""

import logging
from typing import Optional

from sqlalchemy import case, delete, or_, select
from sqlalchemy.orm import Session, selectinload, sessionmaker

from terra_discover.domain.catalog.entities import (
    SCALAR_SPACE_FIELDS,
    NewSpace,
    Space,
    SpaceChanges,
)
from terra_discover.domain.catalog.ports import SpaceRepository
from terra_discover.domain.errors import RelatedRecordMissingError
from terra_discover.domain.presence import is_set
from terra_discover.infrastructure.catalog.models import (
    SpaceCategoryModel,
    SpaceFeatureModel,
    SpaceModel,
)
from terra_discover.infrastructure.database import as_utc, translate_errors, utcnow

logger = logging.getLogger(__name__)

_WITH_RELATIONS = (
    selectinload(SpaceModel.categories),
    selectinload(SpaceModel.features),
)


def _to_space(model: SpaceModel) -> Space:
    return Space(
        id=model.id,
        name=model.name,
        slug=model.slug,
        description=model.description,
        type_id=model.type_id,
        submitted_by_id=model.submitted_by_id,
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
        alternate_names=list(model.alternate_names or []),
        activities=list(model.activities or []),
        historical_context=model.historical_context,
        architectural_style=model.architectural_style,
        operating_hours=model.operating_hours,
        entrance_fee=model.entrance_fee,
        contact_info=model.contact_info,
        accessibility=model.accessibility,
        categories=sorted(category.name for category in model.categories),
        features=sorted(feature.name for feature in model.features),
    )


def _load_terms(session: Session, model_cls, term_ids: list[str]) -> list:
    """Load taxonomy rows for a set replacement.

    Raises RelatedRecordMissingError when a row vanished after validation.
    """
    if not term_ids:
        return []

    rows = session.scalars(select(model_cls).where(model_cls.id.in_(term_ids))).all()
    if len(rows) != len(set(term_ids)):
        found = {row.id for row in rows}
        missing = [term_id for term_id in term_ids if term_id not in found]
        raise RelatedRecordMissingError(
            f"{model_cls.__tablename__} rows missing: {', '.join(missing)}"
        )
    return list(rows)


class SpaceRepositoryAdapter(SpaceRepository):
    """Persists spaces to the relational store.

    Implements the SpaceRepository port defined in the domain layer.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def list_all(self) -> list[Space]:
        with translate_errors(), self._session_factory() as session:
            models = session.scalars(
                select(SpaceModel).options(*_WITH_RELATIONS).order_by(SpaceModel.created_at)
            ).all()
            return [_to_space(model) for model in models]

    def list_by_author(self, user_id: str) -> list[Space]:
        with translate_errors(), self._session_factory() as session:
            models = session.scalars(
                select(SpaceModel)
                .options(*_WITH_RELATIONS)
                .where(SpaceModel.submitted_by_id == user_id)
                .order_by(SpaceModel.created_at)
            ).all()
            return [_to_space(model) for model in models]

    def get_by_id(self, space_id: str) -> Optional[Space]:
        with translate_errors(), self._session_factory() as session:
            model = session.get(SpaceModel, space_id, options=_WITH_RELATIONS)
            return _to_space(model) if model is not None else None

    def find_by_identifier(self, identifier: str) -> Optional[Space]:
        query = (
            select(SpaceModel)
            .options(*_WITH_RELATIONS)
            .where(or_(SpaceModel.id == identifier, SpaceModel.slug == identifier))
            .order_by(case((SpaceModel.id == identifier, 0), else_=1))
            .limit(1)
        )
        with translate_errors(), self._session_factory() as session:
            model = session.scalars(query).first()
            return _to_space(model) if model is not None else None

    def slug_exists(self, slug: str) -> bool:
        with translate_errors(), self._session_factory() as session:
            found = session.scalar(select(SpaceModel.id).where(SpaceModel.slug == slug))
            return found is not None

    def add(self, space: NewSpace) -> Space:
        """Insert a space with its type, author, categories and features.

        Args:
            space: The fully validated new space.

        Returns:
            The stored space, with generated ID and timestamps.
        """
        now = utcnow()
        with translate_errors(), self._session_factory.begin() as session:
            model = SpaceModel(
                name=space.name,
                slug=space.slug,
                description=space.description,
                alternate_names=list(space.alternate_names),
                activities=list(space.activities),
                historical_context=space.historical_context,
                architectural_style=space.architectural_style,
                operating_hours=space.operating_hours,
                entrance_fee=space.entrance_fee,
                contact_info=space.contact_info,
                accessibility=space.accessibility,
                type_id=space.type_id,
                submitted_by_id=space.submitted_by_id,
                created_at=now,
                updated_at=now,
            )
            model.categories = _load_terms(session, SpaceCategoryModel, space.category_ids)
            model.features = _load_terms(session, SpaceFeatureModel, space.feature_ids)
            session.add(model)
            session.flush()
            result = _to_space(model)

        logger.debug("Inserted space id=%s slug=%s", result.id, result.slug)
        return result

    def update(self, space_id: str, changes: SpaceChanges) -> Optional[Space]:
        """Apply the set fields of ``changes`` to one space.

        Args:
            space_id: Immutable ID of the space; never the slug.
            changes: Merged change set; unset fields are left untouched.

        Returns:
            The space as stored after the update, or None if it is gone.
        """
        with translate_errors(), self._session_factory.begin() as session:
            model = session.get(SpaceModel, space_id, options=_WITH_RELATIONS)
            if model is None:
                return None

            for field_name in (*SCALAR_SPACE_FIELDS, "slug", "type_id"):
                value = getattr(changes, field_name)
                if is_set(value):
                    setattr(model, field_name, value)

            if is_set(changes.category_ids):
                model.categories = _load_terms(session, SpaceCategoryModel, changes.category_ids)
            if is_set(changes.feature_ids):
                model.features = _load_terms(session, SpaceFeatureModel, changes.feature_ids)

            model.updated_at = utcnow()
            session.flush()
            result = _to_space(model)

        logger.debug("Updated space id=%s", result.id)
        return result

    def delete(self, space_id: str) -> bool:
        with translate_errors(), self._session_factory.begin() as session:
            deleted = session.execute(delete(SpaceModel).where(SpaceModel.id == space_id))
            return deleted.rowcount > 0
