"""Configuration management for fluents."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings."""

    # Worker Configuration
    thread_name_prefix: str = Field(default="fluent", description="Prefix for worker thread names")
    daemon_workers: bool = Field(default=True, description="Run worker threads as daemon threads")

    # Result Configuration
    copy_results: bool = Field(default=True, description="Deep-copy every delivered solution")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="default", description="Log profile (default, cli)")

    class Config:
        """Pydantic configuration."""

        env_prefix = "FLUENTS_"
        case_sensitive = False
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings, loaded once from the environment."""
    return Settings()
