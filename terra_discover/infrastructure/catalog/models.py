"""
SQLAlchemy models for the catalog bounded context.

- One table per taxonomy kind, names unique within the kind
- Join tables for the two many-to-many relations of a space
- Semi-structured documents and name lists stored as JSON
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Table, Text
from sqlalchemy.orm import relationship

from terra_discover.infrastructure.database import Base, new_id, utcnow

ID_LENGTH = 36
TAXONOMY_NAME_LENGTH = 100
ARCHITECTURAL_STYLE_LENGTH = 100


# =============================================================================
# Join Tables for Many-to-Many Relationships
# =============================================================================

space_category_links = Table(
    "space_category_links",
    Base.metadata,
    Column(
        "space_id",
        String(ID_LENGTH),
        ForeignKey("spaces.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        String(ID_LENGTH),
        ForeignKey("space_categories.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)

space_feature_links = Table(
    "space_feature_links",
    Base.metadata,
    Column(
        "space_id",
        String(ID_LENGTH),
        ForeignKey("spaces.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "feature_id",
        String(ID_LENGTH),
        ForeignKey("space_features.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


# =============================================================================
# Taxonomies
# =============================================================================


class SpaceTypeModel(Base):
    __tablename__ = "space_types"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(String(TAXONOMY_NAME_LENGTH), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class SpaceCategoryModel(Base):
    __tablename__ = "space_categories"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(String(TAXONOMY_NAME_LENGTH), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class SpaceFeatureModel(Base):
    __tablename__ = "space_features"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(String(TAXONOMY_NAME_LENGTH), nullable=False, unique=True)
    description = Column(Text, nullable=True)


# =============================================================================
# Spaces
# =============================================================================


class SpaceModel(Base):
    __tablename__ = "spaces"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(Text, nullable=False)
    slug = Column(Text, nullable=False, unique=True)
    alternate_names = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=False, default="")
    activities = Column(JSON, nullable=False, default=list)
    historical_context = Column(Text, nullable=True)
    architectural_style = Column(String(ARCHITECTURAL_STYLE_LENGTH), nullable=True)

    # Opaque documents, no schema enforced on contents
    operating_hours = Column(JSON, nullable=True)
    entrance_fee = Column(JSON, nullable=True)
    contact_info = Column(JSON, nullable=True)
    accessibility = Column(JSON, nullable=True)

    type_id = Column(
        String(ID_LENGTH),
        ForeignKey("space_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    submitted_by_id = Column(
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    categories = relationship(
        SpaceCategoryModel,
        secondary=space_category_links,
        order_by=SpaceCategoryModel.name,
        passive_deletes=True,
    )
    features = relationship(
        SpaceFeatureModel,
        secondary=space_feature_links,
        order_by=SpaceFeatureModel.name,
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<SpaceModel(id={self.id}, slug={self.slug})>"
