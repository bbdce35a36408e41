"""
Settings of the Campus Coffee API.

Every field is read from the environment variable of the same name in
upper case and has a default, so the service starts unconfigured with
a local SQLite file.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Campus Coffee API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty: log to stderr only.
    log_file: str = os.getenv("LOG_FILE", "")
    # Relative paths are taken relative to the campus_coffee_api package.
    database_url: str = os.getenv("DATABASE_URL", "campus_coffee.db")


settings = Settings()
