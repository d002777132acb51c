"""
Centralized configuration management.
Uses environment variables with sensible defaults.
"""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with validation."""

    # Clustering configuration
    MIN_POINTS_PER_CLUSTER: int = 1
    SAMPLE_COUNT: int = 10
    RADIUS_FACTOR: float = 0.8
    RADIUS: Optional[float] = None  # None to estimate from the route

    # Random source
    RANDOM_SEED: Optional[int] = None

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # or "json"
    LOG_FILE: Optional[Path] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


# Global settings instance
settings = Settings()
