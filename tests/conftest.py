"""Shared pytest fixtures for the full Hukamnama test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_paths import hukamnama_page_fixture_path as resolve_page_fixture_path


@pytest.fixture
def hukamnama_page_fixture_path() -> Path:
    """Provide the saved Hukamnama page fixture path."""

    return resolve_page_fixture_path()


@pytest.fixture
def hukamnama_page_html(hukamnama_page_fixture_path: Path) -> str:
    """Provide the saved Hukamnama page HTML."""

    return hukamnama_page_fixture_path.read_text(encoding="utf-8")
