"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior. Update commands use the
UNSET marker so that absent fields differ from null or empty ones.
"""

from dataclasses import dataclass, field
from typing import Optional

from terra_discover.domain.catalog.entities import JsonDocument
from terra_discover.domain.presence import UNSET, Maybe


@dataclass(frozen=True)
class CreateSpaceCommand:
    """Input DTO for creating a space.

    Attributes:
        author_id: ID of the authenticated caller, recorded as the author.
        name: Display name; the slug is derived from it.
        type_id: ID of the mandatory space type.
        description: Free text; None is stored as an empty string.
        category_ids: Categories to attach (None or empty for none).
        feature_ids: Features to attach (None or empty for none).
    """

    author_id: str
    name: str
    type_id: str
    description: Optional[str] = None
    alternate_names: list[str] = field(default_factory=list)
    activities: list[str] = field(default_factory=list)
    historical_context: Optional[str] = None
    architectural_style: Optional[str] = None
    operating_hours: Optional[JsonDocument] = None
    entrance_fee: Optional[JsonDocument] = None
    contact_info: Optional[JsonDocument] = None
    accessibility: Optional[JsonDocument] = None
    category_ids: Optional[list[str]] = None
    feature_ids: Optional[list[str]] = None


@dataclass(frozen=True)
class UpdateSpaceCommand:
    """Input DTO for a partial space update.

    Attributes:
        caller_id: ID of the authenticated caller.
        identifier: Space ID or slug.

    Every other field defaults to UNSET, meaning "leave unchanged".
    ``category_ids=[]`` clears the categories; UNSET keeps them.
    """

    caller_id: str
    identifier: str
    name: Maybe[str] = UNSET
    description: Maybe[Optional[str]] = UNSET
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


@dataclass(frozen=True)
class DeleteSpaceCommand:
    """Input DTO for deleting a space by its ID."""

    caller_id: str
    space_id: str


@dataclass(frozen=True)
class CreateTaxonomyCommand:
    """Input DTO for creating a type, category or feature."""

    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class UpdateTaxonomyCommand:
    """Input DTO for partially updating a type, category or feature."""

    term_id: str
    name: Maybe[str] = UNSET
    description: Maybe[Optional[str]] = UNSET
