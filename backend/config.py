"""Backend configuration."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # API settings
    api_title: str = "Spray Window API"
    api_version: str = "1.0.0"
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]

    # Analysis defaults
    default_spray_type: str = "herbicide"
    default_utc_offset_seconds: int = 0

    log_level: str = "INFO"

    class Config:
        env_prefix = "SPRAYWINDOW_"


settings = Settings()
