"""
Configuration Management.

Two sources:

Settings file (.advisor):
    The list of advisor apps, an optional default app, and the selection
    policy. Discovered by walking up from the working directory, or given
    explicitly with --config / ADVISOR_CONFIG_PATH.

Environment (ADVISOR_*):
    Process settings: logging level and format, request timeouts.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from advisor.core.config_schema import AdvisorFileSchema
from advisor.core.exceptions import ConfigNotFound
from advisor.domain.registry import Instance, Registry

CONFIG_FILENAMES = (".advisor", ".advisor.yaml", ".advisor.yml", ".advisor.json")


class AdvisorSettings(BaseSettings):
    """Process-level settings read from ADVISOR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ADVISOR_",
        case_sensitive=False,
        extra="ignore",
    )

    config_path: Path | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["console", "json"] = "console"
    healthcheck_timeout: float = Field(default=1.0, gt=0)
    listing_timeout: float = Field(default=5.0, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> AdvisorSettings:
    """
    Get cached process settings.

    Raises:
        ConfigNotFound: If an ADVISOR_* variable holds an invalid value.
    """
    try:
        return AdvisorSettings()
    except ValidationError as e:
        raise ConfigNotFound(f"Invalid ADVISOR_* settings:\n{e}") from e


def find_config_file(start: Path | None = None) -> Path:
    """Find the settings file by walking up from `start` (default: cwd)."""
    current = (start or Path.cwd()).resolve()
    while True:
        for filename in CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                return candidate
        if current == current.parent:
            break
        current = current.parent
    raise ConfigNotFound(
        f"Could not open config: none of {', '.join(CONFIG_FILENAMES)} found"
    )


def load_config_file(path: Path) -> AdvisorFileSchema:
    """Read and validate a settings file."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigNotFound(f"Could not open config {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise ConfigNotFound(f"Could not read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigNotFound(f"Could not parse config {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigNotFound(f"Invalid configuration in {path}: expected a mapping")

    try:
        return AdvisorFileSchema(**raw)
    except ValidationError as e:
        raise ConfigNotFound(f"Invalid configuration in {path}:\n{e}") from e


def load_registry(path: Path | None = None) -> Registry:
    """
    Build the instance registry from the settings file.

    Args:
        path: Explicit settings file. Falls back to ADVISOR_CONFIG_PATH,
            then to discovery from the working directory.

    Raises:
        ConfigNotFound: If no file is found or it cannot be parsed.
    """
    path = path or get_settings().config_path or find_config_file()
    schema = load_config_file(path)
    return Registry(
        instances=tuple(
            Instance(name=app.name, location=app.location, auth_token=app.token)
            for app in schema.apps
        ),
        default_name=schema.default,
        selection=schema.selection,
    )
