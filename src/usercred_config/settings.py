"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. USERCRED_ENV_FILE environment variable (path to a .env file)
3. config/.env.dev - local development
4. config/.env - production

Uses pydantic-settings for automatic type coercion and validation. The
database settings are validated as soon as Settings is built, so a missing
host, user, name or password fails before any query is attempted.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. USERCRED_ENV_FILE env var
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("USERCRED_ENV_FILE")
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

    Either DB_URL is given as a complete SQLAlchemy URL, or the URL is built
    from DB_DRIVER, DB_HOST, DB_PORT, DB_USER, DB_PASSWORD and DB_NAME.
    DB_PASSWORD may be empty (local MySQL root) but must be set.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "usercred"

    # Database (DB_ prefix)
    db_url: str | None = None
    db_driver: str = "mysql+pymysql"
    db_host: str | None = None
    db_port: int = 3306
    db_user: str | None = None
    db_password: SecretStr | None = None
    db_name: str | None = None
    db_echo: bool = False

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @model_validator(mode="after")
    def _validate_database_config(self) -> Settings:
        """Fail fast when the connection settings are incomplete."""
        if self.db_url and self.db_url.strip():
            return self

        missing = [
            env_name
            for env_name, value in (
                ("DB_HOST", self.db_host),
                ("DB_USER", self.db_user),
                ("DB_NAME", self.db_name),
            )
            if value is None or not value.strip()
        ]
        if self.db_password is None:
            missing.append("DB_PASSWORD")

        if missing:
            msg = (
                "Database configuration is incomplete, missing: "
                f"{', '.join(missing)} (or set DB_URL)"
            )
            raise ValueError(msg)
        return self

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Construct the database URL from components."""
        if self.db_url and self.db_url.strip():
            return self.db_url.strip()

        password = self.db_password.get_secret_value() if self.db_password else ""
        url = URL.create(
            self.db_driver,
            username=self.db_user,
            password=password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    @property
    def safe_database_url(self) -> str:
        """Database URL with the password masked, for logs and messages."""
        return make_url(self.database_url).render_as_string(hide_password=True)


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    Raises pydantic.ValidationError if the database settings are incomplete.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
