"""Cat schemas."""

from pydantic import BaseModel, ConfigDict, Field

from decaf.models.enums import CatType


class CatCreate(BaseModel):
    """Create a new cat."""

    name: str = Field(..., min_length=1, max_length=100)
    type: CatType


class CatUpdate(BaseModel):
    """Update a cat."""

    name: str | None = Field(None, min_length=1, max_length=100)
    type: CatType | None = None


class CatResponse(BaseModel):
    """Cat response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: CatType
