"""Command-line interface for Hukamnama.

Responsibilities:
- Expose user-facing commands for fetching, parsing, and aligning text.
- Convert CLI arguments into `HukamnamaConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_json,
    echo_line_pairs,
    echo_transcript,
    exit_with_command_error,
)
from .config import ConfigLoader, HukamnamaConfig
from .errors import PipelineStageError
from .parsing import normalize_optional_string
from .pipeline import TRANSCRIPT_ARTIFACT, HukamnamaPipeline
from .telemetry.logger import RunLogger
from .text.aligner import align

app = typer.Typer(
    name="hukamnama",
    no_args_is_help=True,
    help="Hukamnama CLI.",
)


class StageProgressIndicator:
    """Render deterministic per-stage progress lines on stderr."""

    _SPINNER_FRAMES = "|/-\\"

    def __init__(self, command_name: str) -> None:
        """Initialize progress indicator metadata for a command invocation."""

        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        spinner = self._SPINNER_FRAMES[(stage_index - 1) % len(self._SPINNER_FRAMES)]
        typer.echo(
            f"[progress] command={self._command_name} "
            f"{spinner} {stage_index}/{stage_total} stage={stage_name}",
            err=True,
        )


def _load_base_config(config_path: Path | None) -> HukamnamaConfig:
    """Load YAML config when requested, else environment defaults, as stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Invalid `HUKAMNAMA_*` environment value: {exc}",
                hint="Fix or unset the offending environment variable.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    url: str | None,
    timeout: float | None,
    fetcher: str | None,
    headless: bool | None,
    out: Path | None,
) -> HukamnamaConfig:
    """Resolve effective command config from file/env defaults and CLI overrides."""

    base = _load_base_config(config_file)
    resolved_fetcher = normalize_optional_string(fetcher)
    return HukamnamaConfig(
        url=normalize_optional_string(url) or base.url,
        timeout_seconds=timeout if timeout is not None else base.timeout_seconds,
        fetcher=resolved_fetcher.lower() if resolved_fetcher is not None else base.fetcher,
        headless=headless if headless is not None else base.headless,
        user_agent=base.user_agent,
        output_dir=out if out is not None else base.output_dir,
    )


def _read_text_file(path: Path, stage: str) -> str:
    """Read a UTF-8 input file and map failures to stage errors."""

    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PipelineStageError(
            stage=stage,
            detail=f"Failed to read `{path}`: {exc}",
            hint="Verify the input file exists and is UTF-8 encoded.",
        ) from exc


@app.command("fetch")
def fetch_command(
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with command defaults.",
        ),
    ] = None,
    url: Annotated[
        str | None,
        typer.Option("--url", help="Hukamnama page URL (overrides config value)."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", min=0.1, help="Page load timeout in seconds."),
    ] = None,
    fetcher: Annotated[
        str | None,
        typer.Option("--fetcher", help="Acquisition backend: `browser` or `http`."),
    ] = None,
    headless: Annotated[
        bool | None,
        typer.Option(
            "--headless/--headed",
            help="Run the browser without or with a visible window.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option(
            "--out",
            help="Directory for `page.html`, `raw_input.json`, and `transcript.json`.",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the transcript as JSON."),
    ] = False,
) -> None:
    """Fetch today's Hukamnama and print the aligned transcript."""
    try:
        config = _resolve_command_config(
            config_file=config_file,
            url=url,
            timeout=timeout,
            fetcher=fetcher,
            headless=headless,
            out=out,
        )
        pipeline = HukamnamaPipeline(
            run_logger=RunLogger(),
            stage_progress_callback=StageProgressIndicator("fetch").on_stage_start,
        )
        transcript = pipeline.run(config)
    except Exception as exc:
        exit_with_command_error("fetch", exc)
    if as_json:
        echo_json(transcript.to_dict())
    else:
        echo_transcript(transcript)
    if config.output_dir is not None:
        typer.echo(f"Transcript: {config.output_dir / TRANSCRIPT_ARTIFACT}", err=True)


@app.command("parse")
def parse_command(
    page: Annotated[Path, typer.Argument(help="Path to a saved Hukamnama page HTML file.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Directory for extracted and transcript artifacts."),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the transcript as JSON."),
    ] = False,
) -> None:
    """Extract and align a previously saved Hukamnama page."""
    try:
        html = _read_text_file(page, stage="read")
        pipeline = HukamnamaPipeline(run_logger=RunLogger())
        transcript = pipeline.run_from_html(html, output_dir=out)
    except Exception as exc:
        exit_with_command_error("parse", exc)
    if as_json:
        echo_json(transcript.to_dict())
    else:
        echo_transcript(transcript)


@app.command("align")
def align_command(
    source: Annotated[Path, typer.Argument(help="Path to raw Gurmukhi text.")],
    translation: Annotated[Path, typer.Argument(help="Path to raw English translation text.")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print line pairs as JSON."),
    ] = False,
) -> None:
    """Align raw Gurmukhi and translation text files line by line."""
    try:
        source_raw = _read_text_file(source, stage="read")
        translation_raw = _read_text_file(translation, stage="read")
        lines = align(source_raw, translation_raw)
    except Exception as exc:
        exit_with_command_error("align", exc)
    if as_json:
        echo_json([line.to_dict() for line in lines])
    else:
        echo_line_pairs(lines)


def main() -> None:
    """Run the Hukamnama CLI application."""

    app()


if __name__ == "__main__":
    main()
