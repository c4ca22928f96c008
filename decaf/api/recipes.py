"""Recipe and recipe step API endpoints."""

from fastapi import APIRouter, status

from decaf.api.dependencies import AuthedContext, PublicContext
from decaf.schemas.recipe import (
    RecipeCreate,
    RecipeResponse,
    RecipeStepCreate,
    RecipeStepResponse,
    RecipeStepUpdate,
    RecipeUpdate,
)
from decaf.services.recipes import RecipeService

router = APIRouter(prefix="/recipes", tags=["recipes"])


# --- Static routes first (before /{recipe_id}) ---


@router.get("", response_model=list[RecipeResponse])
def list_recipes(ctx: PublicContext):
    """List all recipes."""
    return RecipeService(ctx).list_recipes()


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(recipe_data: RecipeCreate, ctx: AuthedContext):
    """Create a new recipe owned by the caller."""
    return RecipeService(ctx).create_recipe(recipe_data)


@router.get("/user/{user_id}", response_model=list[RecipeResponse])
def list_user_recipes(user_id: str, ctx: AuthedContext):
    """List recipes created by a user."""
    return RecipeService(ctx).list_recipes_by_user(user_id)


# --- Steps ---


@router.post("/steps", response_model=RecipeStepResponse, status_code=status.HTTP_201_CREATED)
def create_step(step_data: RecipeStepCreate, ctx: AuthedContext):
    """Add a step to a recipe the caller may edit."""
    return RecipeService(ctx).create_step(step_data)


@router.get("/steps/{step_id}", response_model=RecipeStepResponse)
def get_step(step_id: str, ctx: PublicContext):
    """Get a recipe step by ID."""
    return RecipeService(ctx).get_step(step_id)


@router.put("/steps/{step_id}", response_model=RecipeStepResponse)
def update_step(step_id: str, step_data: RecipeStepUpdate, ctx: AuthedContext):
    """Update a recipe step."""
    return RecipeService(ctx).update_step(step_id, step_data)


@router.delete("/steps/{step_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_step(step_id: str, ctx: AuthedContext):
    """Delete a recipe step."""
    RecipeService(ctx).delete_step(step_id)


# --- Recipe by ID ---


@router.get("/{recipe_id}/steps", response_model=list[RecipeStepResponse])
def list_steps(recipe_id: str, ctx: PublicContext):
    """List a recipe's steps in step order."""
    return RecipeService(ctx).list_steps(recipe_id)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: str, ctx: PublicContext):
    """Get a recipe by ID."""
    return RecipeService(ctx).get_recipe(recipe_id)


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(recipe_id: str, recipe_data: RecipeUpdate, ctx: AuthedContext):
    """Update a recipe the caller may edit."""
    return RecipeService(ctx).update_recipe(recipe_id, recipe_data)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(recipe_id: str, ctx: AuthedContext):
    """Delete a recipe along with its steps and tag links."""
    RecipeService(ctx).delete_recipe(recipe_id)
