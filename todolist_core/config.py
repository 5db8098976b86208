"""Configuration management using pydantic-settings."""

from datetime import timedelta

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .auth.token import TokenKeys


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The two JWT secrets have no default: constructing Settings without them
    fails, which makes a missing secret a startup error rather than a
    per-request one.
    """

    database_path: str = "./data/todolist.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # "production" switches the Secure flag on for session cookies
    environment: str = "development"
    log_level: str = "INFO"

    # JWT Configuration
    jwt_access_secret: str = Field(min_length=1)
    jwt_refresh_secret: str = Field(min_length=1)
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 15
    refresh_token_expire_days: int = 7

    # Bcrypt work factor. Tests lower it to 4 for speed.
    bcrypt_work_factor: int = Field(default=10, ge=4, le=31)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_secrets(self):
        """Access and refresh tokens must be signed with different keys."""
        if self.jwt_access_secret == self.jwt_refresh_secret:
            raise ValueError(
                "JWT_ACCESS_SECRET and JWT_REFRESH_SECRET must be different values"
            )
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in {"prod", "production"}

    def token_keys(self) -> TokenKeys:
        """Build the immutable signing configuration for the token service."""
        return TokenKeys(
            access_secret=self.jwt_access_secret,
            refresh_secret=self.jwt_refresh_secret,
            algorithm=self.jwt_algorithm,
            access_ttl=timedelta(minutes=self.access_token_expire_minutes),
            refresh_ttl=timedelta(days=self.refresh_token_expire_days),
        )


def load_settings(**overrides) -> Settings:
    """
    Load settings once at process start.

    Keyword overrides take precedence over the environment, which is how
    tests inject their own secrets and database path.

    Raises:
        pydantic.ValidationError: If a required secret is missing or invalid
    """
    return Settings(**overrides)
