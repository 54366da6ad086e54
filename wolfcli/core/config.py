"""
Configuration Management.

Loads secrets from config/.env and settings from config/settings/*.yaml.
Both are optional: outside a checkout of this project (no .wolfq_root marker)
the schema defaults apply, so an installed client works from any directory.

Secrets (.env or process environment):
    WOLFRAM_APPID

Settings (YAML):
    application.yaml   - App identity, API endpoint, query defaults
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from wolfcli.core.config_schema import ApplicationSchema, LoggingSchema
from wolfcli.core.exceptions import ConfigurationError

ROOT_MARKER = ".wolfq_root"
"""Marks a checkout of this project; config/ is resolved next to it."""

DEFAULT_APPID = "H9V325-HTALUWHKGK"
"""Placeholder key used when neither config/.env nor the environment sets one."""


def find_project_root() -> Path:
    """Find project root by looking for the .wolfq_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ROOT_MARKER).exists():
            return current
        current = current.parent
    raise RuntimeError(f"Project root not found. Ensure {ROOT_MARKER} file exists.")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Secrets loaded from config/.env or the environment."""

    wolfram_appid: str = DEFAULT_APPID

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """
    Load YAML and validate against schema. Returns typed model instance.

    A missing project root or file yields the schema defaults; a file that
    exists but does not parse or validate is an error.

    Raises:
        ConfigurationError: If the file is malformed or fails validation
    """
    try:
        raw = load_yaml_config(filename)
    except (RuntimeError, FileNotFoundError):
        return schema_cls()
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {filename}: {e}") from e
    try:
        return schema_cls(**raw)
    except (ValidationError, TypeError) as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached secrets instance. Uses config/.env when a project root exists."""
    try:
        env_path = find_project_root() / "config" / ".env"
    except RuntimeError:
        return Settings()
    if not env_path.is_file():
        return Settings()
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_default_appid() -> str:
    """API key used when --appid is not given."""
    return get_settings().wolfram_appid
