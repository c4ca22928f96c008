"""Tag and RecipeTag models."""

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.orm import relationship

from decaf.database import Base
from decaf.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin, utcnow


class Tag(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Tag model. Both name and slug are unique."""

    __tablename__ = "tags"

    name = Column(String(100), unique=True, nullable=False)
    slug = Column(String(100), unique=True, nullable=False, index=True)

    # Relationships
    recipe_links = relationship("RecipeTag", back_populates="tag", passive_deletes=True)


class RecipeTag(Base):
    """Junction between recipes and tags."""

    __tablename__ = "recipe_tags"

    recipe_id = Column(
        String(36),
        ForeignKey("recipes.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
        index=True,
    )
    tag_id = Column(
        String(36),
        ForeignKey("tags.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    recipe = relationship("Recipe", back_populates="tag_links")
    tag = relationship("Tag", back_populates="recipe_links")
