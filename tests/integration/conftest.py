"""Integration-test fixtures for deterministic page acquisition."""

from __future__ import annotations

import pytest

from hukamnama.io.page_fetcher import BrowserPageFetcher, HttpPageFetcher


@pytest.fixture(autouse=True)
def _clear_hukamnama_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `HUKAMNAMA_*` variables from leaking into CLI config resolution."""

    for key in (
        "HUKAMNAMA_URL",
        "HUKAMNAMA_TIMEOUT_SECONDS",
        "HUKAMNAMA_FETCHER",
        "HUKAMNAMA_HEADLESS",
        "HUKAMNAMA_USER_AGENT",
        "HUKAMNAMA_OUTPUT_DIR",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_page_fetch(
    monkeypatch: pytest.MonkeyPatch, hukamnama_page_html: str
) -> list[tuple[str, str]]:
    """Serve the saved page from both fetchers and record `(backend, url)` calls."""

    calls: list[tuple[str, str]] = []

    def _mock_browser_fetch(self: BrowserPageFetcher, url: str) -> str:
        calls.append(("browser", url))
        return hukamnama_page_html

    def _mock_http_fetch(self: HttpPageFetcher, url: str) -> str:
        calls.append(("http", url))
        return hukamnama_page_html

    monkeypatch.setattr(BrowserPageFetcher, "fetch", _mock_browser_fetch)
    monkeypatch.setattr(HttpPageFetcher, "fetch", _mock_http_fetch)
    return calls
