"""SQLAlchemy models."""

from decaf.models.cat import Cat
from decaf.models.recipe import Recipe, RecipeStep
from decaf.models.tag import RecipeTag, Tag
from decaf.models.user import User
from decaf.models.user_preferences import UserPreferences

__all__ = [
    "User",
    "UserPreferences",
    "Cat",
    "Recipe",
    "RecipeStep",
    "Tag",
    "RecipeTag",
]
