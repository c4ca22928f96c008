"""Tag API endpoints."""

from fastapi import APIRouter, HTTPException, status

from decaf.api.dependencies import PublicContext
from decaf.errors import AppError
from decaf.schemas.tag import AddTagsToRecipe, AddTagsToRecipeResponse, TagCreate, TagResponse
from decaf.services.tags import TagService

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=list[TagResponse])
def list_tags(ctx: PublicContext):
    """List all tags by name."""
    return TagService(ctx).list_tags()


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
def create_tag(tag_data: TagCreate, ctx: PublicContext):
    """Create a tag; the slug is derived from the name."""
    return TagService(ctx).create_tag(tag_data.name)


@router.post("/add-to-recipe", response_model=AddTagsToRecipeResponse)
def add_tags_to_recipe(request: AddTagsToRecipe, ctx: PublicContext):
    """Attach tags to a recipe by name, creating any that do not exist yet."""
    try:
        tags = TagService(ctx).add_tags_to_recipe(request.recipe_id, request.tag_names)
    except AppError:
        raise
    except Exception:
        ctx.logger.exception("Error adding tags to recipe")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add tags to recipe",
        ) from None

    return AddTagsToRecipeResponse(
        recipe_id=request.recipe_id,
        tags_added=[TagResponse.model_validate(tag) for tag in tags],
    )


@router.get("/{tag_id}", response_model=TagResponse)
def get_tag(tag_id: str, ctx: PublicContext):
    """Get a tag by ID."""
    return TagService(ctx).get_tag(tag_id)
