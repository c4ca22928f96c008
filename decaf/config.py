"""DECAF settings, read from the environment and an optional .env file."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "super-secret-key-change-me-in-production"  # noqa: S105


class Settings(BaseSettings):
    """Runtime settings. Built once and handed to the app factory."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./data/decaf.db")

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=1440)  # 1 day

    # Password and PIN hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Session cookie (token is also accepted as a bearer header)
    session_cookie_name: str = Field(default="decaf_session")
    session_cookie_enabled: bool = Field(default=True)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    api_prefix: str = Field(default="/api/v1")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
        ]
    )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Refuse to run production with the shipped JWT secret."""
        if self.environment == "production" and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
