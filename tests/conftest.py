"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs from the project root with fresh configuration caches and
without WOLFRAM_APPID in the environment, so configuration always comes
from the repository's own config/settings files.
"""

import logging
from pathlib import Path

import pytest
import structlog

from wolfcli.core.config import get_app_config, get_settings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def _project_environment(monkeypatch: pytest.MonkeyPatch):
    """Run from the project root with clean config caches."""
    monkeypatch.chdir(PROJECT_ROOT)
    monkeypatch.delenv("WOLFRAM_APPID", raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop handlers added by setup_logging so they never outlive their stream."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def project_root() -> Path:
    """Absolute path of the repository root."""
    return PROJECT_ROOT
