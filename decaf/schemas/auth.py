"""Authentication schemas."""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def coerce_pin(value: object) -> object:
    """Turn a numeric PIN into its decimal string form.

    Strings pass through untouched so "00123456" keeps its leading zeros.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


Pin = Annotated[str, BeforeValidator(coerce_pin)]


class UserRegister(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=9, max_length=72)
    pin: Pin


class UserLogin(BaseModel):
    """User login request. Exactly one of password or pin is expected."""

    username: str = Field(..., min_length=3, max_length=50)
    password: str | None = Field(None, min_length=9, max_length=72)
    pin: Pin | None = None


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    role: str


class RegisterResponse(BaseModel):
    """Registration response. Secrets are never echoed back."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str


class AuthResponse(BaseModel):
    """Login response with token and user info."""

    user: UserResponse
    token: str


class AuthStatusResponse(BaseModel):
    """Whether the caller carries a valid session."""

    is_authenticated: bool
    user: UserResponse | None = None
