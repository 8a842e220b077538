"""
tests/conftest.py -- Shared fixtures for validauth-docs tests.

This module provides:
  - clean_settings: clears the get_settings() cache so each test sees the
    environment it sets up with monkeypatch
  - no_color: forces plain output so assertions can match exact text

No test touches the network: the release fetcher's requests session is
patched wherever a test reaches it.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from core import formatter
from core.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Generator[None, None, None]:
    """Drop cached Settings and VALIDAUTH_* env vars around every test."""
    for name in ("DEBUG", "LOG_LEVEL", "GITHUB_REPO", "GITHUB_API_URL", "REQUEST_TIMEOUT", "DOCS_DIR"):
        monkeypatch.delenv(f"VALIDAUTH_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def no_color() -> Generator[None, None, None]:
    formatter.disable_color()
    yield
    formatter.reset_color()
