"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Roles carried in session tokens."""

    USER = "user"
    ADMIN = "admin"


class CatType(str, Enum):
    """Cat breeds accepted by the cats resource."""

    PERSIAN = "persian"
    SIAMESE = "siamese"
    MAINE_COON = "maine coon"
    BENGAL = "bengal"
    RAGDOLL = "ragdoll"
    OTHER = "other"


class CommandType(str, Enum):
    """Machine commands a recipe step can issue."""

    MOVE = "move"
    GRIND = "grind"
    POUR = "pour"
    WAIT = "wait"
    MEASURE = "measure"
    OTHER = "other"


class StrengthPreference(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    STRONG = "strong"


class NotificationMethod(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"
    NONE = "none"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Language(str, Enum):
    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"
