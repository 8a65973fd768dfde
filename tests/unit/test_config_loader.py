"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from hukamnama.config import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_URL,
    DEFAULT_USER_AGENT,
    ConfigLoader,
    HukamnamaConfig,
)


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize typed/blank values."""

    config_path = tmp_path / "hukamnama.yml"
    config_path.write_text(
        """
url: " https://example.org/hukamnama "
timeout_seconds: " 15 "
fetcher: " HTTP "
headless: "no"
user_agent: " agent/1.0 "
output_dir: " out "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.url == "https://example.org/hukamnama"
    assert config.timeout_seconds == 15.0
    assert config.fetcher == "http"
    assert config.headless is False
    assert config.user_agent == "agent/1.0"
    assert config.output_dir == Path("out")


def test_config_loader_from_yaml_applies_defaults_for_empty_file(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    config = ConfigLoader.from_yaml(config_path)

    assert config.url == DEFAULT_URL
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert config.fetcher == "browser"
    assert config.headless is True
    assert config.user_agent == DEFAULT_USER_AGENT
    assert config.output_dir is None


def test_config_loader_from_yaml_rejects_unknown_keys_and_bad_values(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unsupported keys or invalid values."""

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text(
        "url: https://hs.sgpc.net/\nbrowser_path: /opt/chrome\n", encoding="utf-8"
    )
    with pytest.raises(ValueError, match=r"unsupported key\(s\): browser_path"):
        ConfigLoader.from_yaml(unknown_path)

    metadata_path = tmp_path / "metadata.yml"
    metadata_path.write_text("extra:\n  profile: nightly\n", encoding="utf-8")
    with pytest.raises(ValueError, match=r"unsupported key\(s\): extra"):
        ConfigLoader.from_yaml(metadata_path)

    timeout_path = tmp_path / "timeout.yml"
    timeout_path.write_text("timeout_seconds: -3\n", encoding="utf-8")
    with pytest.raises(ValueError, match="`timeout_seconds` must be a positive number"):
        ConfigLoader.from_yaml(timeout_path)

    fetcher_path = tmp_path / "fetcher.yml"
    fetcher_path.write_text("fetcher: telnet\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported fetcher `telnet`"):
        ConfigLoader.from_yaml(fetcher_path)

    list_path = tmp_path / "list.yml"
    list_path.write_text("- url\n- timeout_seconds\n", encoding="utf-8")
    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(list_path)


def test_config_loader_from_env_reads_prefixed_values() -> None:
    config = ConfigLoader.from_env(
        {
            "HUKAMNAMA_URL": "https://example.org/",
            "HUKAMNAMA_TIMEOUT_SECONDS": "12.5",
            "HUKAMNAMA_FETCHER": "Http",
            "HUKAMNAMA_HEADLESS": "off",
            "HUKAMNAMA_USER_AGENT": "env-agent",
            "HUKAMNAMA_OUTPUT_DIR": "artifacts",
            "UNRELATED": "ignored",
        }
    )

    assert config == HukamnamaConfig(
        url="https://example.org/",
        timeout_seconds=12.5,
        fetcher="http",
        headless=False,
        user_agent="env-agent",
        output_dir=Path("artifacts"),
    )


def test_config_loader_from_env_uses_defaults_and_rejects_invalid_tokens() -> None:
    assert ConfigLoader.from_env({}) == HukamnamaConfig()

    with pytest.raises(ValueError, match="HUKAMNAMA_HEADLESS"):
        ConfigLoader.from_env({"HUKAMNAMA_HEADLESS": "sometimes"})
    with pytest.raises(ValueError, match="HUKAMNAMA_TIMEOUT_SECONDS"):
        ConfigLoader.from_env({"HUKAMNAMA_TIMEOUT_SECONDS": "soon"})


def test_config_validate_rejects_blank_url() -> None:
    with pytest.raises(ValueError, match="`url` must be a non-empty string"):
        HukamnamaConfig(url="  ").validate()


@pytest.mark.parametrize("timeout_text", ["nan", "inf"])
def test_config_loader_from_env_rejects_non_finite_timeout(timeout_text: str) -> None:
    with pytest.raises(ValueError, match="HUKAMNAMA_TIMEOUT_SECONDS"):
        ConfigLoader.from_env({"HUKAMNAMA_TIMEOUT_SECONDS": timeout_text})


@pytest.mark.parametrize("timeout_seconds", [float("nan"), float("inf")])
def test_config_validate_rejects_non_finite_timeout(timeout_seconds: float) -> None:
    with pytest.raises(ValueError, match="`timeout_seconds` must be a positive number"):
        HukamnamaConfig(timeout_seconds=timeout_seconds).validate()
