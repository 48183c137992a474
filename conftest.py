"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from number_words.config import ENV_PREFIX, load_settings  # noqa: E402
from number_words.parser import default_parser  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    """Run every test against default settings, whatever the shell exports."""
    for name in ("MAX_SCALE", "INT_BITS", "LOG_LEVEL"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)
    load_settings.cache_clear()
    default_parser.cache_clear()
    yield
    load_settings.cache_clear()
    default_parser.cache_clear()
