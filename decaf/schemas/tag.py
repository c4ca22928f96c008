"""Tag schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

TagName = Annotated[str, Field(min_length=1, max_length=100)]


class TagCreate(BaseModel):
    """Create a single tag. The slug is derived from the name."""

    name: str = Field(..., min_length=3, max_length=100)


class TagResponse(BaseModel):
    """Tag response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str


class AddTagsToRecipe(BaseModel):
    """Attach tags to a recipe by name, creating missing ones."""

    recipe_id: str = Field(..., min_length=1)
    # An empty list is rejected by the service with a readable message
    tag_names: list[TagName]


class AddTagsToRecipeResponse(BaseModel):
    """Result of attaching tags to a recipe."""

    message: str = "Tags successfully added to recipe"
    recipe_id: str
    tags_added: list[TagResponse]
