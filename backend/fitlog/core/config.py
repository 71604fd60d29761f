"""
Application configuration.
All values can be overridden from environment variables or a .env file.
"""
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    APP_NAME: str = "FitLog"

    # Storage
    # Supported backends: database, memory
    STORAGE_BACKEND: str = "database"
    DATABASE_URL: str = "sqlite:///./data/fitlog.db"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console

    # Render Debug Logging - logs every panel produced by a dashboard recompute
    RENDER_DEBUG_LOG: bool = False

    # Goals used when nothing has been saved yet
    DEFAULT_TIME_GOAL: int = 150
    DEFAULT_CALORIE_GOAL: int = 2000

    # Presentation
    RECENT_LOG_LIMIT: int = 10
    CHART_DAYS: int = 7

    # Export
    EXPORT_FILENAME_PREFIX: str = "fitness-tracker-"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
