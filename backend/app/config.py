"""Application configuration."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    # Algo instances (YAML); empty = algos.yaml next to the backend package
    algo_config_path: str = ""

    # Default delay (ms) for order submission when args don't set one
    default_submit_delay: int = 0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
