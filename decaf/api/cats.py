"""Cat API endpoints."""

from fastapi import APIRouter, status

from decaf.api.dependencies import AuthedContext, PublicContext
from decaf.schemas.cat import CatCreate, CatResponse, CatUpdate
from decaf.services.cats import CatService

router = APIRouter(prefix="/cats", tags=["cats"])


@router.get("", response_model=list[CatResponse])
def list_cats(ctx: PublicContext):
    """List all cats."""
    return CatService(ctx).list_cats()


@router.get("/{cat_id}", response_model=CatResponse)
def get_cat(cat_id: str, ctx: PublicContext):
    """Get a cat by ID."""
    return CatService(ctx).get_cat(cat_id)


@router.post("", response_model=CatResponse, status_code=status.HTTP_201_CREATED)
def create_cat(cat_data: CatCreate, ctx: AuthedContext):
    """Create a new cat."""
    return CatService(ctx).create_cat(cat_data)


@router.put("/{cat_id}", response_model=CatResponse)
def update_cat(cat_id: str, cat_data: CatUpdate, ctx: AuthedContext):
    """Update a cat."""
    return CatService(ctx).update_cat(cat_id, cat_data)


@router.delete("/{cat_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cat(cat_id: str, ctx: AuthedContext):
    """Delete a cat."""
    CatService(ctx).delete_cat(cat_id)
