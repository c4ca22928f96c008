"""User preferences API endpoints. All routes act on the caller's own row."""

from fastapi import APIRouter, status

from decaf.api.dependencies import AuthedContext
from decaf.schemas.user_preferences import (
    UserPreferencesCreate,
    UserPreferencesResponse,
    UserPreferencesUpdate,
)
from decaf.services.user_preferences import UserPreferencesService

router = APIRouter(prefix="/user-preferences", tags=["user-preferences"])


@router.get("", response_model=UserPreferencesResponse)
def get_preferences(ctx: AuthedContext):
    """Get the current user's preferences."""
    return UserPreferencesService(ctx).get_preferences()


@router.post("", response_model=UserPreferencesResponse, status_code=status.HTTP_201_CREATED)
def create_preferences(preferences_data: UserPreferencesCreate, ctx: AuthedContext):
    """Create preferences for the current user."""
    return UserPreferencesService(ctx).create_preferences(preferences_data)


@router.put("", response_model=UserPreferencesResponse)
def update_preferences(preferences_data: UserPreferencesUpdate, ctx: AuthedContext):
    """Update the current user's preferences."""
    return UserPreferencesService(ctx).update_preferences(preferences_data)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_preferences(ctx: AuthedContext):
    """Delete the current user's preferences."""
    UserPreferencesService(ctx).delete_preferences()
