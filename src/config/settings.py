"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from psycopg.conninfo import make_conninfo
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database connection target
    db_host: str = "127.0.0.1"
    db_port: int = 5432
    db_user: str = "userregistr"
    db_pass: str = ""
    db_name: str = "userregistr"
    database_url: str | None = None  # Overrides the db_* fields when set

    # Connection pool
    pool_min_size: int = 2  # Minimum connections in pool
    pool_max_size: int = 10  # Maximum connections in pool
    pool_max_lifetime: float = 120.0  # Seconds before a connection is recycled
    pool_timeout: float = 30.0  # Seconds to wait for a free connection

    # Security settings
    bcrypt_cost: int = Field(default=10, ge=4, le=31)  # bcrypt work factor

    # HTTP server
    http_host: str = "0.0.0.0"
    http_port: int = 8080
    cors_allow_origins: list[str] = ["*"]

    log_level: str = "INFO"

    @property
    def conninfo(self) -> str:
        """libpq connection string for the configured database."""
        if self.database_url:
            return self.database_url
        return make_conninfo(
            host=self.db_host,
            port=self.db_port,
            user=self.db_user,
            password=self.db_pass,
            dbname=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
