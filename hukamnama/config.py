"""Configuration model and loaders for Hukamnama runs.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `HukamnamaConfig`: normalized runtime settings for one fetch run.
- `ConfigLoader`: static construction helpers for `HukamnamaConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_positive_float,
    parse_required_boolean,
)


DEFAULT_URL = "https://hs.sgpc.net/"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
SUPPORTED_FETCHERS = frozenset({"browser", "http"})


@dataclass(slots=True)
class HukamnamaConfig:
    """Runtime configuration for one Hukamnama run.

    Attributes:
        url: Page that publishes the daily Hukamnama.
        timeout_seconds: Navigation/request timeout.
        fetcher: Acquisition backend id (`browser` or `http`).
        headless: Whether the browser runs without a visible window.
        user_agent: User agent sent with page requests.
        output_dir: Optional directory for page and transcript artifacts.
    """

    url: str = DEFAULT_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    fetcher: str = "browser"
    headless: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    output_dir: Path | None = None

    def validate(self) -> None:
        """Validate runtime configuration values before pipeline execution."""

        if normalize_optional_string(self.url) is None:
            raise ValueError("`url` must be a non-empty string.")
        if not math.isfinite(self.timeout_seconds) or self.timeout_seconds <= 0:
            raise ValueError("`timeout_seconds` must be a positive number.")
        if self.fetcher not in SUPPORTED_FETCHERS:
            supported = ", ".join(sorted(SUPPORTED_FETCHERS))
            raise ValueError(
                f"Unsupported fetcher `{self.fetcher}`. Supported values: {supported}."
            )
        if normalize_optional_string(self.user_agent) is None:
            raise ValueError("`user_agent` must be a non-empty string.")


class ConfigLoader:
    """Factory methods for creating `HukamnamaConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "url",
            "timeout_seconds",
            "fetcher",
            "headless",
            "user_agent",
            "output_dir",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> HukamnamaConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> HukamnamaConfig:
        """Create a validated config from `HUKAMNAMA_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        timeout_text = normalize_optional_string(env_map.get("HUKAMNAMA_TIMEOUT_SECONDS"))
        headless_text = normalize_optional_string(env_map.get("HUKAMNAMA_HEADLESS"))
        output_dir_text = normalize_optional_string(env_map.get("HUKAMNAMA_OUTPUT_DIR"))

        config = HukamnamaConfig(
            url=normalize_optional_string(env_map.get("HUKAMNAMA_URL")) or DEFAULT_URL,
            timeout_seconds=(
                parse_positive_float(timeout_text, "HUKAMNAMA_TIMEOUT_SECONDS")
                if timeout_text is not None
                else DEFAULT_TIMEOUT_SECONDS
            ),
            fetcher=(
                normalize_optional_string(env_map.get("HUKAMNAMA_FETCHER")) or "browser"
            ).lower(),
            headless=(
                parse_required_boolean(headless_text, "HUKAMNAMA_HEADLESS")
                if headless_text is not None
                else True
            ),
            user_agent=(
                normalize_optional_string(env_map.get("HUKAMNAMA_USER_AGENT"))
                or DEFAULT_USER_AGENT
            ),
            output_dir=Path(output_dir_text) if output_dir_text is not None else None,
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> HukamnamaConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown_keys = sorted(
            str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS
        )
        if unknown_keys:
            raise ValueError(
                f"{source_label} contains unsupported key(s): {', '.join(unknown_keys)}."
            )

        url = normalize_optional_string(payload.get("url")) or DEFAULT_URL
        timeout_value = payload.get("timeout_seconds")
        timeout_seconds = (
            parse_positive_float(timeout_value, "timeout_seconds")
            if normalize_optional_string(timeout_value) is not None
            else DEFAULT_TIMEOUT_SECONDS
        )
        fetcher = (normalize_optional_string(payload.get("fetcher")) or "browser").lower()
        headless_value = payload.get("headless")
        headless = (
            parse_required_boolean(headless_value, "headless")
            if normalize_optional_string(headless_value) is not None
            else True
        )
        user_agent = normalize_optional_string(payload.get("user_agent")) or DEFAULT_USER_AGENT
        output_dir_text = normalize_optional_string(payload.get("output_dir"))

        config = HukamnamaConfig(
            url=url,
            timeout_seconds=timeout_seconds,
            fetcher=fetcher,
            headless=headless,
            user_agent=user_agent,
            output_dir=Path(output_dir_text) if output_dir_text is not None else None,
        )
        config.validate()
        return config
