"""User model."""

from sqlalchemy import Column, String

from decaf.database import Base
from decaf.models.enums import Role
from decaf.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    pin_hash = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, default=Role.USER.value)
