"""Cat model."""

from sqlalchemy import Column, String

from decaf.database import Base
from decaf.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Cat(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Demo resource used to exercise plain CRUD."""

    __tablename__ = "cats"

    name = Column(String(100), nullable=False)
    type = Column(String(20), nullable=False)  # one of CatType
