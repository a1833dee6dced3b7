"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. MAKEMEACUBE_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. MAKEMEACUBE_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("MAKEMEACUBE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "MakeMeACube"
    debug: bool = False

    # Database (any SQLAlchemy async URL)
    database_url: str = "sqlite+aiosqlite:///./makemeacube.db"

    # Passwords (bcrypt work factor)
    password_hash_rounds: int = 12

    # SMTP (SMTP_ prefix)
    smtp_enabled: bool = False
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: SecretStr | None = None
    smtp_from_email: str = ""
    smtp_from_name: str = "MakeMeACube"
    smtp_use_tls: bool = True
    smtp_starttls: bool = True

    # Frontend URL (for email verification links)
    frontend_base_url: str = "http://localhost:5173"
    email_verification_path: str = "/verify-email"

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("password_hash_rounds")
    @classmethod
    def _validate_rounds(cls, v: int) -> int:
        # bcrypt accepts work factors 4..31
        if not 4 <= v <= 31:
            msg = "password_hash_rounds must be between 4 and 31"
            raise ValueError(msg)
        return v

    @property
    def email_verification_url(self) -> str:
        base = self.frontend_base_url.rstrip("/")
        path = "/" + self.email_verification_path.lstrip("/")
        return f"{base}{path}"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
