# event_planner/config/settings.py
# Runtime configuration for the Event Planner API

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


DEFAULT_CORS_ORIGINS = ",".join([
    "http://localhost:3000",   # Local development frontend
    "http://localhost:5173",   # Vite dev server
    "http://127.0.0.1:3000",   # Alternative localhost
])


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when the instance is created, so tests can build a
    ``Settings`` with explicit overrides and hand it to ``create_app``.
    """

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Event Planner API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./event_planner.db"))
    sql_echo: bool = field(default_factory=lambda: _env_bool("SQL_ECHO", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Token settings
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "change_me"))
    refresh_secret_key: str = field(default_factory=lambda: os.getenv("REFRESH_SECRET_KEY", "change_me_too"))
    algorithm: str = field(default_factory=lambda: os.getenv("ALGORITHM", "HS256"))
    access_token_expire_minutes: int = field(
        default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5"))
    )
    refresh_token_expire_days: int = field(
        default_factory=lambda: int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "7"))
    )

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))

    # Bootstrap admin used by create_tables.py
    default_admin_email: str = field(default_factory=lambda: os.getenv("DEFAULT_ADMIN_EMAIL", "admin@example.com"))
    default_admin_password: str = field(default_factory=lambda: os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123"))


def get_settings() -> Settings:
    return Settings()
