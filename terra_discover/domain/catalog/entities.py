"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from terra_discover.domain.presence import UNSET, Maybe

JsonDocument = dict[str, Any]


class TaxonomyKind(Enum):
    """The three reference-data taxonomies a space points to."""

    TYPE = "Space Type"
    CATEGORY = "Category"
    FEATURE = "Feature"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class TaxonomyTerm:
    """A single type, category or feature row."""

    id: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class TaxonomyChanges:
    """Partial update of a taxonomy term. Unset fields are left alone."""

    name: Maybe[str] = UNSET
    description: Maybe[Optional[str]] = UNSET


@dataclass(frozen=True)
class Space:
    """A catalogued point of interest as read back from the store.

    Categories and features are flattened to their names, ordered by name.
    """

    id: str
    name: str
    slug: str
    description: str
    type_id: str
    submitted_by_id: str
    created_at: datetime
    updated_at: datetime
    alternate_names: list[str] = field(default_factory=list)
    activities: list[str] = field(default_factory=list)
    historical_context: Optional[str] = None
    architectural_style: Optional[str] = None
    operating_hours: Optional[JsonDocument] = None
    entrance_fee: Optional[JsonDocument] = None
    contact_info: Optional[JsonDocument] = None
    accessibility: Optional[JsonDocument] = None
    categories: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NewSpace:
    """Everything needed to insert a space and its relations in one write."""

    name: str
    slug: str
    description: str
    type_id: str
    submitted_by_id: str
    alternate_names: list[str] = field(default_factory=list)
    activities: list[str] = field(default_factory=list)
    historical_context: Optional[str] = None
    architectural_style: Optional[str] = None
    operating_hours: Optional[JsonDocument] = None
    entrance_fee: Optional[JsonDocument] = None
    contact_info: Optional[JsonDocument] = None
    accessibility: Optional[JsonDocument] = None
    category_ids: list[str] = field(default_factory=list)
    feature_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SpaceChanges:
    """Merged change set for a partial space update.

    Only fields that are set are written. For ``category_ids`` and
    ``feature_ids`` a set value, including an empty list, replaces the
    whole association.
    """

    name: Maybe[str] = UNSET
    slug: Maybe[str] = UNSET
    description: Maybe[str] = UNSET
    alternate_names: Maybe[list[str]] = UNSET
    activities: Maybe[list[str]] = UNSET
    historical_context: Maybe[Optional[str]] = UNSET
    architectural_style: Maybe[Optional[str]] = UNSET
    operating_hours: Maybe[Optional[JsonDocument]] = UNSET
    entrance_fee: Maybe[Optional[JsonDocument]] = UNSET
    contact_info: Maybe[Optional[JsonDocument]] = UNSET
    accessibility: Maybe[Optional[JsonDocument]] = UNSET
    type_id: Maybe[str] = UNSET
    category_ids: Maybe[list[str]] = UNSET
    feature_ids: Maybe[list[str]] = UNSET


SCALAR_SPACE_FIELDS = (
    "name",
    "description",
    "alternate_names",
    "activities",
    "historical_context",
    "architectural_style",
    "operating_hours",
    "entrance_fee",
    "contact_info",
    "accessibility",
)
