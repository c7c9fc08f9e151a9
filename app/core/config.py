"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_JWT_SECRET = "change-me"
MIN_JWT_SECRET_BYTES = 32


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix every route is mounted under.
        database_url: SQLAlchemy async URL of the user store.
        jwt_secret: HMAC key for access tokens. Outside debug mode it must
            be set and at least 32 bytes long.
        jwt_algorithm: JWS algorithm used to sign access tokens.
        jwt_expiration_minutes: Lifetime of an access token.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "AuthGate"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    database_url: str = "sqlite+aiosqlite:///./authgate.db"

    jwt_secret: str = PLACEHOLDER_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 1440  # 24 hours

    @model_validator(mode="after")
    def check_jwt_secret(self) -> "Settings":
        """Reject the placeholder or a short signing key unless in debug mode."""
        if self.debug:
            return self
        if self.jwt_secret == PLACEHOLDER_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set when debug is disabled")
        if len(self.jwt_secret.encode("utf-8")) < MIN_JWT_SECRET_BYTES:
            raise ValueError(
                f"JWT_SECRET must be at least {MIN_JWT_SECRET_BYTES} bytes long"
            )
        return self


settings = Settings()
