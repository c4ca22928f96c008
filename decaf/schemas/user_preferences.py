"""User preferences schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from decaf.models.enums import Language, NotificationMethod, StrengthPreference, Theme, Units

E164_PATTERN = r"^\+?[1-9]\d{1,14}$"
IANA_TIMEZONE_PATTERN = r"^[A-Za-z_]+/[A-Za-z_]+$"


class UserPreferencesUpdate(BaseModel):
    """Update user preferences. Only supplied fields are changed."""

    strength_preference: StrengthPreference | None = None
    default_cup_size: int | None = Field(None, ge=50, le=1000)  # ml
    notifications_brewed: bool | None = None
    notifications_maintenance: bool | None = None
    notifications_errors: bool | None = None
    notification_method: NotificationMethod | None = None
    sms_phone_number: str | None = Field(None, pattern=E164_PATTERN)
    allow_integrations: bool | None = None
    cloud_control_access: bool | None = None
    theme: Theme | None = None
    auto_brew_schedule: str | None = None
    units: Units | None = None
    share_recipes: bool | None = None
    language: Language | None = None
    timezone: str | None = Field(None, max_length=50, pattern=IANA_TIMEZONE_PATTERN)


class UserPreferencesCreate(UserPreferencesUpdate):
    """Create user preferences. Omitted fields fall back to column defaults."""


class UserPreferencesResponse(BaseModel):
    """User preferences response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    strength_preference: StrengthPreference
    default_cup_size: int
    notifications_brewed: bool
    notifications_maintenance: bool
    notifications_errors: bool
    notification_method: NotificationMethod
    sms_phone_number: str | None
    allow_integrations: bool
    cloud_control_access: bool
    theme: Theme
    auto_brew_schedule: str | None
    units: Units
    share_recipes: bool
    language: Language
    timezone: str
    created_at: datetime
    updated_at: datetime
