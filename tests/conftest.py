"""
Root Pytest Fixtures.

Shared fixtures available to all tests. Settings are isolated from the
developer's environment and the settings cache is reset around each test.
"""

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import yaml

from advisor.core.config import get_settings

ADVISOR_ENV_VARS = (
    "ADVISOR_CONFIG_PATH",
    "ADVISOR_LOG_LEVEL",
    "ADVISOR_LOG_FORMAT",
    "ADVISOR_HEALTHCHECK_TIMEOUT",
    "ADVISOR_LISTING_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear ADVISOR_* variables and the settings cache."""
    for var in ADVISOR_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """
    Write a settings file into tmp_path.

    Usage:
        path = write_config({"apps": [{"name": "a", "location": "http://a"}]})
        path = write_config("apps: [", name=".advisor.yaml")
    """

    def _write(data: dict[str, Any] | str, name: str = ".advisor") -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else yaml.safe_dump(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def two_apps() -> dict[str, Any]:
    """Settings with two apps, the first one carrying a token."""
    return {
        "apps": [
            {"name": "staging", "location": "http://staging.test", "token": "tok"},
            {"name": "production", "location": "http://production.test/"},
        ],
    }
