"""Recipe service: recipe and step CRUD with ownership checks."""

from decaf.context import RequestContext
from decaf.errors import ForbiddenError, NotFoundError
from decaf.models.recipe import Recipe, RecipeStep
from decaf.schemas.recipe import RecipeCreate, RecipeStepCreate, RecipeStepUpdate, RecipeUpdate


class RecipeService:
    """Service for recipe-related operations."""

    def __init__(self, ctx: RequestContext):
        self.ctx = ctx
        self.db = ctx.db

    def _check_owner(self, recipe: Recipe, action: str) -> None:
        """Allow the mutation only if the recipe is unowned or owned by the caller."""
        if recipe.created_by and recipe.created_by != self.ctx.user_id:
            raise ForbiddenError(f"You are not authorized to {action}")

    # --- Recipes ---

    def list_recipes(self) -> list[Recipe]:
        return self.db.query(Recipe).order_by(Recipe.created_at).all()

    def list_recipes_by_user(self, user_id: str) -> list[Recipe]:
        return (
            self.db.query(Recipe)
            .filter(Recipe.created_by == user_id)
            .order_by(Recipe.created_at)
            .all()
        )

    def get_recipe(self, recipe_id: str) -> Recipe:
        recipe = self.db.get(Recipe, recipe_id)
        if not recipe:
            raise NotFoundError(f"Recipe with ID {recipe_id} not found")
        return recipe

    def create_recipe(self, data: RecipeCreate) -> Recipe:
        recipe = Recipe(created_by=self.ctx.user_id, **data.model_dump())
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def update_recipe(self, recipe_id: str, data: RecipeUpdate) -> Recipe:
        recipe = self.get_recipe(recipe_id)
        self._check_owner(recipe, "update this recipe")

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(recipe, field, value)

        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def delete_recipe(self, recipe_id: str) -> None:
        """Hard delete a recipe. Steps and tag links go with it."""
        recipe = self.get_recipe(recipe_id)
        self._check_owner(recipe, "delete this recipe")

        self.db.delete(recipe)
        self.db.commit()
        self.ctx.logger.info(f"Deleted recipe {recipe_id}")

    # --- Steps ---

    def list_steps(self, recipe_id: str) -> list[RecipeStep]:
        """List a recipe's steps by step_order, then created_at, then id."""
        self.get_recipe(recipe_id)
        return (
            self.db.query(RecipeStep)
            .filter(RecipeStep.recipe_id == recipe_id)
            .order_by(RecipeStep.step_order, RecipeStep.created_at, RecipeStep.id)
            .all()
        )

    def get_step(self, step_id: str) -> RecipeStep:
        step = self.db.get(RecipeStep, step_id)
        if not step:
            raise NotFoundError(f"Recipe step with ID {step_id} not found")
        return step

    def create_step(self, data: RecipeStepCreate) -> RecipeStep:
        recipe = self.get_recipe(data.recipe_id)
        self._check_owner(recipe, "add steps to this recipe")

        step = RecipeStep(**data.model_dump(mode="json"))
        self.db.add(step)
        self.db.commit()
        self.db.refresh(step)
        return step

    def update_step(self, step_id: str, data: RecipeStepUpdate) -> RecipeStep:
        step = self.get_step(step_id)
        self._check_owner(self.get_recipe(step.recipe_id), "update steps for this recipe")

        updates = data.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        for field, value in updates.items():
            setattr(step, field, value)

        self.db.commit()
        self.db.refresh(step)
        return step

    def delete_step(self, step_id: str) -> None:
        step = self.get_step(step_id)
        self._check_owner(self.get_recipe(step.recipe_id), "delete steps for this recipe")

        self.db.delete(step)
        self.db.commit()
