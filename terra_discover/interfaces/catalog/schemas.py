"""
Pydantic schemas for catalog API request/response validation.

Spaces accept category and feature IDs on write and return their names
on read. Update schemas keep track of which keys were actually sent, so
routers can forward only those to the use case.
No business logic belongs here.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from terra_discover.domain.catalog.entities import Space, TaxonomyTerm
from terra_discover.interfaces.schemas import CamelModel

TAXONOMY_NAME_MAX_LEN = 100
ARCHITECTURAL_STYLE_MAX_LEN = 100

JsonDocument = Optional[dict[str, Any]]

# Keys that may be omitted on update but never sent as null
NON_NULLABLE_UPDATE_FIELDS = (
    "name",
    "type_id",
    "alternate_names",
    "activities",
    "category_ids",
    "feature_ids",
)


class SpaceResponse(CamelModel):
    """A space as returned by every space endpoint."""

    id: str
    name: str
    slug: str
    alternate_names: list[str]
    description: str
    activities: list[str]
    historical_context: Optional[str] = None
    architectural_style: Optional[str] = None
    operating_hours: JsonDocument = None
    entrance_fee: JsonDocument = None
    contact_info: JsonDocument = None
    accessibility: JsonDocument = None
    created_at: datetime
    updated_at: datetime
    type_id: str
    submitted_by_id: str
    categories: list[str]
    features: list[str]

    @classmethod
    def from_entity(cls, space: Space) -> "SpaceResponse":
        return cls(
            id=space.id,
            name=space.name,
            slug=space.slug,
            alternate_names=space.alternate_names,
            description=space.description,
            activities=space.activities,
            historical_context=space.historical_context,
            architectural_style=space.architectural_style,
            operating_hours=space.operating_hours,
            entrance_fee=space.entrance_fee,
            contact_info=space.contact_info,
            accessibility=space.accessibility,
            created_at=space.created_at,
            updated_at=space.updated_at,
            type_id=space.type_id,
            submitted_by_id=space.submitted_by_id,
            categories=space.categories,
            features=space.features,
        )


class CreateSpaceRequest(CamelModel):
    """Request schema for creating a space.

    Attributes:
        name: Display name (required, non-empty).
        type_id: ID of an existing space type (required).
        category_ids: IDs of existing categories; empty or omitted for none.
        feature_ids: IDs of existing features; empty or omitted for none.
    """

    name: str = Field(..., min_length=1)
    type_id: str = Field(..., min_length=1)
    description: Optional[str] = None
    alternate_names: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)
    historical_context: Optional[str] = None
    architectural_style: Optional[str] = Field(
        default=None, max_length=ARCHITECTURAL_STYLE_MAX_LEN
    )
    operating_hours: JsonDocument = None
    entrance_fee: JsonDocument = None
    contact_info: JsonDocument = None
    accessibility: JsonDocument = None
    category_ids: Optional[list[str]] = None
    feature_ids: Optional[list[str]] = None


class UpdateSpaceRequest(CamelModel):
    """Request schema for a partial space update.

    Omitted keys leave the stored value unchanged. ``categoryIds: []``
    clears the categories; omitting ``categoryIds`` keeps them.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    type_id: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    alternate_names: Optional[list[str]] = None
    activities: Optional[list[str]] = None
    historical_context: Optional[str] = None
    architectural_style: Optional[str] = Field(
        default=None, max_length=ARCHITECTURAL_STYLE_MAX_LEN
    )
    operating_hours: JsonDocument = None
    entrance_fee: JsonDocument = None
    contact_info: JsonDocument = None
    accessibility: JsonDocument = None
    category_ids: Optional[list[str]] = None
    feature_ids: Optional[list[str]] = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "UpdateSpaceRequest":
        for field_name in NON_NULLABLE_UPDATE_FIELDS:
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise ValueError(f"{field_name} cannot be null")
        return self


class TaxonomyTermResponse(CamelModel):
    """A space type, category or feature."""

    id: str
    name: str
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, term: TaxonomyTerm) -> "TaxonomyTermResponse":
        return cls(id=term.id, name=term.name, description=term.description)


class CreateTaxonomyRequest(CamelModel):
    """Request schema for creating a type, category or feature."""

    name: str = Field(..., min_length=1, max_length=TAXONOMY_NAME_MAX_LEN)
    description: Optional[str] = None


class UpdateTaxonomyRequest(CamelModel):
    """Request schema for partially updating a type, category or feature."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=TAXONOMY_NAME_MAX_LEN)
    description: Optional[str] = None

    @model_validator(mode="after")
    def reject_null_name(self) -> "UpdateTaxonomyRequest":
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name cannot be null")
        return self
