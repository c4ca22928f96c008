"""Recipe and recipe step schemas."""

from pydantic import BaseModel, ConfigDict, Field

from decaf.models.enums import CommandType

# --- Recipe Step ---


class RecipeStepCreate(BaseModel):
    """Create a recipe step."""

    recipe_id: str = Field(..., min_length=1)
    step_order: int = Field(..., ge=0)
    duration_sec: int | None = Field(None, ge=0)
    command_type: CommandType
    command_parameter: int | None = None


class RecipeStepUpdate(BaseModel):
    """Update a recipe step."""

    step_order: int | None = Field(None, ge=0)
    duration_sec: int | None = Field(None, ge=0)
    command_type: CommandType | None = None
    command_parameter: int | None = None


class RecipeStepResponse(BaseModel):
    """Recipe step response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    recipe_id: str
    step_order: int
    duration_sec: int | None
    command_type: CommandType
    command_parameter: int | None


# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    coffee_weight: float = Field(..., ge=0)
    water_weight: float = Field(..., ge=0)
    water_temperature: int = Field(..., ge=0, le=100)
    grind_size: str | None = Field(None, max_length=50)
    brew_time: int = Field(..., ge=0)


class RecipeUpdate(BaseModel):
    """Update a recipe."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    coffee_weight: float | None = Field(None, ge=0)
    water_weight: float | None = Field(None, ge=0)
    water_temperature: int | None = Field(None, ge=0, le=100)
    grind_size: str | None = Field(None, max_length=50)
    brew_time: int | None = Field(None, ge=0)


class RecipeResponse(BaseModel):
    """Recipe response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_by: str | None
    name: str
    description: str | None
    coffee_weight: float
    water_weight: float
    water_temperature: int
    grind_size: str | None
    brew_time: int
