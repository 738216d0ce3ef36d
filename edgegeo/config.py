from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from edgegeo.models.common import EdgePlatform


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Which edge network populates the geolocation headers
    edge_platform: EdgePlatform = EdgePlatform.vercel

    log_level: str = "INFO"  # DEBUG, WARNING, ERROR
    # Plain output for hosted log drains when false
    log_colors: bool = True

    # Local runner (run_app.py)
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
