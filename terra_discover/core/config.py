"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; modules import `settings`.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (serves OpenAPI docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for every API router.
        cors_origins: Origins allowed by the CORS middleware.
        database_url: Full SQLAlchemy URL. Built from postgres_* when unset.
        sql_echo: Log every SQL statement (development only).
        jwt_secret: HMAC secret for access tokens.
        jwt_algorithm: JWT signing algorithm.
        access_token_ttl_seconds: Lifetime of issued tokens.
        slug_max_attempts: Numbered slug candidates tried before a random suffix.
        slug_conflict_retries: Regenerate-and-retry rounds after a slug race.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Terra Discover API"
    version: str = "0.0.1"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    database_url: Optional[str] = None
    sql_echo: bool = False
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "terra_discover"

    jwt_secret: str = "your_super_secret_jwt_key"
    jwt_algorithm: str = "HS256"
    access_token_ttl_seconds: int = 2 * 60 * 60

    slug_max_attempts: int = 100
    slug_conflict_retries: int = 1

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a PostgreSQL URL from postgres_* values (Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
