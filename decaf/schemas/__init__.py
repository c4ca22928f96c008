"""Pydantic schemas for API requests and responses."""

from decaf.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from decaf.schemas.cat import CatCreate, CatResponse, CatUpdate
from decaf.schemas.recipe import (
    RecipeCreate,
    RecipeResponse,
    RecipeStepCreate,
    RecipeStepResponse,
    RecipeStepUpdate,
    RecipeUpdate,
)
from decaf.schemas.tag import AddTagsToRecipe, AddTagsToRecipeResponse, TagCreate, TagResponse
from decaf.schemas.user_preferences import (
    UserPreferencesCreate,
    UserPreferencesResponse,
    UserPreferencesUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "CatCreate",
    "CatUpdate",
    "CatResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "RecipeStepCreate",
    "RecipeStepUpdate",
    "RecipeStepResponse",
    "TagCreate",
    "TagResponse",
    "AddTagsToRecipe",
    "AddTagsToRecipeResponse",
    "UserPreferencesCreate",
    "UserPreferencesUpdate",
    "UserPreferencesResponse",
]
