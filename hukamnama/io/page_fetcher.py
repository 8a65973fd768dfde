"""Page acquisition backends for the Hukamnama site.

Responsibilities:
- Return the fully rendered HTML of the Hukamnama page, or fail with `FetchError`.
- Scope every browser session to a single fetch and release it on all exit paths.

Key types:
- `PageFetcher`: protocol implemented by acquisition backends.
- `BrowserPageFetcher`: Playwright Chromium backend for script-rendered pages.
- `HttpPageFetcher`: plain `requests` backend for server-rendered pages.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright
import requests

from ..config import HukamnamaConfig

_BROWSER_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")


class FetchError(RuntimeError):
    """Raised when the page cannot be loaded.

    `failure_kind` is one of `timeout`, `launch`, `navigation`, `http`,
    `transport`, or `empty`.
    """

    def __init__(
        self,
        message: str,
        *,
        failure_kind: str = "unknown",
        status_code: int | None = None,
    ) -> None:
        """Initialize fetch failure metadata for stage-aware diagnostics."""

        super().__init__(message)
        self.failure_kind = failure_kind
        self.status_code = status_code


class PageFetcher(Protocol):
    """Protocol for page acquisition backends."""

    def fetch(self, url: str) -> str:
        """Return rendered page HTML for `url`."""


class BrowserPageFetcher:
    """Load a page in headless Chromium and return its rendered HTML."""

    def __init__(
        self,
        *,
        timeout_seconds: float,
        user_agent: str,
        headless: bool = True,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ) -> None:
        """Initialize browser launch and navigation settings."""

        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self.headless = headless
        self._playwright_factory = playwright_factory

    def fetch(self, url: str) -> str:
        """Navigate to `url`, wait for network idle, and return page content."""

        try:
            with self._playwright_factory() as playwright:
                try:
                    browser = playwright.chromium.launch(
                        headless=self.headless,
                        args=list(_BROWSER_ARGS),
                    )
                except PlaywrightError as exc:
                    raise FetchError(
                        f"Failed to launch browser: {exc}",
                        failure_kind="launch",
                    ) from exc
                try:
                    page = browser.new_page(user_agent=self.user_agent)
                    page.goto(
                        url,
                        wait_until="networkidle",
                        timeout=self.timeout_seconds * 1000.0,
                    )
                    html = page.content()
                finally:
                    browser.close()
        except FetchError:
            raise
        except PlaywrightTimeoutError as exc:
            raise FetchError(
                f"Timed out loading `{url}` after {self.timeout_seconds:g}s.",
                failure_kind="timeout",
            ) from exc
        except PlaywrightError as exc:
            raise FetchError(
                f"Failed to load `{url}`: {exc}",
                failure_kind="navigation",
            ) from exc

        if not html.strip():
            raise FetchError(f"Page `{url}` returned empty content.", failure_kind="empty")
        return html


class HttpPageFetcher:
    """Fetch a page with a single HTTP GET request."""

    def __init__(self, *, timeout_seconds: float, user_agent: str) -> None:
        """Initialize request timeout and headers."""

        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent

    def fetch(self, url: str) -> str:
        """GET `url` and return the decoded response body."""

        try:
            response = requests.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise FetchError(
                f"Request to `{url}` failed with HTTP {status_code}.",
                failure_kind="http",
                status_code=status_code,
            ) from exc
        except requests.Timeout as exc:
            raise FetchError(
                f"Timed out loading `{url}` after {self.timeout_seconds:g}s.",
                failure_kind="timeout",
            ) from exc
        except requests.RequestException as exc:
            raise FetchError(
                f"Request to `{url}` failed: {exc}",
                failure_kind="transport",
            ) from exc

        html = response.text
        if not html.strip():
            raise FetchError(f"Page `{url}` returned empty content.", failure_kind="empty")
        return html


def create_page_fetcher(config: HukamnamaConfig) -> PageFetcher:
    """Create the acquisition backend selected by `config.fetcher`."""

    if config.fetcher == "http":
        return HttpPageFetcher(
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
        )
    if config.fetcher == "browser":
        return BrowserPageFetcher(
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
            headless=config.headless,
        )
    raise ValueError(f"Unsupported fetcher `{config.fetcher}`.")
