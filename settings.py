"""
Service settings.
Read from the environment (or a local .env file).
"""
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""
    LOG_LEVEL: str = "INFO"

    # Extraction
    MAX_WORKERS: int = 4
    MAX_UPLOAD_FILES: int = 10

    # Origins allowed to call the upload endpoint
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
    ]

    # Pipeline config used by the CLI
    CONFIG_PATH: str = "config.yaml"

    class Config:
        env_file = ".env"
        extra = "ignore"  # Allow extra fields


settings = Settings()
