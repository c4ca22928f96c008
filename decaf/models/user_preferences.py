"""User preferences model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import backref, relationship

from decaf.database import Base
from decaf.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class UserPreferences(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Per-user display, notification and unit settings."""

    __tablename__ = "user_preferences"

    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    strength_preference = Column(String(10), nullable=False, default="medium")
    default_cup_size = Column(Integer, nullable=False, default=300)  # ml
    notifications_brewed = Column(Boolean, nullable=False, default=True)
    notifications_maintenance = Column(Boolean, nullable=False, default=True)
    notifications_errors = Column(Boolean, nullable=False, default=True)
    notification_method = Column(String(10), nullable=False, default="email")
    sms_phone_number = Column(String(20), nullable=True)
    allow_integrations = Column(Boolean, nullable=False, default=False)
    cloud_control_access = Column(Boolean, nullable=False, default=False)
    theme = Column(String(20), nullable=False, default="auto")
    auto_brew_schedule = Column(Text, nullable=True)  # JSON string
    units = Column(String(10), nullable=False, default="metric")
    share_recipes = Column(Boolean, nullable=False, default=True)
    language = Column(String(5), nullable=False, default="en")
    timezone = Column(String(50), nullable=False, default="UTC")

    # Relationships
    user = relationship(
        "User", backref=backref("preferences", uselist=False, cascade="all, delete-orphan")
    )
