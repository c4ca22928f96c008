"""Recipe and RecipeStep models."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from decaf.database import Base
from decaf.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Recipe(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Brewing recipe. Unowned recipes (created_by is NULL) are editable by anyone."""

    __tablename__ = "recipes"

    created_by = Column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    coffee_weight = Column(Float, nullable=False)  # grams
    water_weight = Column(Float, nullable=False)  # grams
    water_temperature = Column(Integer, nullable=False)  # celsius
    grind_size = Column(String(50), nullable=True)
    brew_time = Column(Integer, nullable=False)  # seconds

    # Relationships
    creator = relationship("User", backref="recipes")
    steps = relationship(
        "RecipeStep",
        back_populates="recipe",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="RecipeStep.step_order",
    )
    tag_links = relationship(
        "RecipeTag", back_populates="recipe", cascade="all, delete-orphan", passive_deletes=True
    )


class RecipeStep(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Single machine command within a recipe."""

    __tablename__ = "recipe_steps"

    recipe_id = Column(
        String(36),
        ForeignKey("recipes.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    step_order = Column(Integer, nullable=False)
    duration_sec = Column(Integer, nullable=True)
    command_type = Column(String(20), nullable=False)  # one of CommandType
    command_parameter = Column(Integer, nullable=True)

    # Relationships
    recipe = relationship("Recipe", back_populates="steps")
