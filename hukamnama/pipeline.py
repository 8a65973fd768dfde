"""Pipeline orchestration for Hukamnama runs.

Responsibilities:
- Define the stage order: fetch, extract, align, and optional artifact writing.
- Map acquisition and extraction failures to one opaque unavailability error.
- Emit stage telemetry through an optional `RunLogger`.

Key types:
- `HukamnamaPipeline`: orchestration facade used by the CLI.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from .config import HukamnamaConfig
from .errors import HukamnamaUnavailableError, PipelineStageError
from .io.page_extractor import HukamnamaPageExtractor, PageExtractionError
from .io.page_fetcher import FetchError, PageFetcher, create_page_fetcher
from .io.storage import ArtifactStore
from .models.datatypes import RawInput, Transcript
from .telemetry.logger import RunLogger
from .text.aligner import build_transcript

_StageResult = TypeVar("_StageResult")

PAGE_ARTIFACT = Path("page.html")
RAW_INPUT_ARTIFACT = Path("raw_input.json")
TRANSCRIPT_ARTIFACT = Path("transcript.json")


class HukamnamaPipeline:
    """Coordinate acquisition, extraction, and alignment for a single run."""

    _PHASE_SEQUENCE = (
        "fetch",
        "extract",
        "align",
        "write",
    )

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
        fetcher_factory: Callable[[HukamnamaConfig], PageFetcher] = create_page_fetcher,
        extractor: HukamnamaPageExtractor | None = None,
    ) -> None:
        """Initialize collaborators and optional logging/progress hooks."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback
        self._fetcher_factory = fetcher_factory
        self._extractor = extractor or HukamnamaPageExtractor()

    def run(self, config: HukamnamaConfig) -> Transcript:
        """Fetch today's page and return its aligned transcript.

        Raises:
            HukamnamaUnavailableError: If the page cannot be fetched or parsed.
            PipelineStageError: If configuration is invalid or artifacts cannot be written.
        """

        self._validate_config(config)
        html = self._run_stage("fetch", lambda: self._fetch(config))
        return self.run_from_html(html, output_dir=config.output_dir)

    def run_from_html(self, html: str, output_dir: Path | None = None) -> Transcript:
        """Extract and align an already acquired page."""

        raw_input = self._run_stage("extract", lambda: self._extract(html))
        transcript = self._run_stage("align", lambda: build_transcript(raw_input))
        if output_dir is not None:
            self._run_stage(
                "write",
                lambda: self._write_artifacts(output_dir, html, raw_input, transcript),
            )
        return transcript

    def _fetch(self, config: HukamnamaConfig) -> str:
        """Load page HTML with a fetcher scoped to this call."""

        fetcher = self._fetcher_factory(config)
        try:
            return fetcher.fetch(config.url)
        except FetchError as exc:
            if exc.failure_kind == "timeout":
                hint = "Increase `--timeout` or check network access."
            elif config.fetcher == "browser":
                hint = (
                    "Verify the site is reachable and Playwright browsers are installed "
                    "(`playwright install chromium`)."
                )
            else:
                hint = "Verify the site is reachable or retry with `--fetcher browser`."
            raise HukamnamaUnavailableError(stage="fetch", hint=hint) from exc

    def _extract(self, html: str) -> RawInput:
        """Extract raw page fields and map layout failures to unavailability."""

        try:
            return self._extractor.extract(html)
        except PageExtractionError as exc:
            raise HukamnamaUnavailableError(
                stage="extract",
                hint=(
                    "The page layout may have changed; save the page HTML and "
                    "check it with `hukamnama parse`."
                ),
            ) from exc

    def _write_artifacts(
        self,
        output_dir: Path,
        html: str,
        raw_input: RawInput,
        transcript: Transcript,
    ) -> Path:
        """Persist page HTML, raw fields, and transcript JSON under `output_dir`."""

        store = ArtifactStore(output_dir)
        try:
            store.save_text(PAGE_ARTIFACT, html)
            store.save_json(RAW_INPUT_ARTIFACT, raw_input.to_dict())
            return store.save_json(TRANSCRIPT_ARTIFACT, transcript.to_dict())
        except OSError as exc:
            raise PipelineStageError(
                stage="write",
                detail=f"Failed to write artifacts to `{output_dir}`: {exc}",
                hint="Verify output directory is writable.",
            ) from exc

    def _validate_config(self, config: HukamnamaConfig) -> None:
        """Validate configuration and map failures to stage-aware error."""

        try:
            config.validate()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=str(exc),
                hint="Update URL, timeout, or fetcher options and rerun the command.",
            ) from exc

    def _stage_position(self, stage_name: str) -> tuple[int, int] | None:
        """Return 1-based stage index and total stage count for known stages."""

        try:
            index = self._PHASE_SEQUENCE.index(stage_name) + 1
        except ValueError:
            return None
        return index, len(self._PHASE_SEQUENCE)

    def _on_stage_start(self, stage_name: str) -> None:
        """Emit start events to stage progress callback and structured logger."""

        stage_position = self._stage_position(stage_name)
        if stage_position and self._stage_progress_callback is not None:
            self._stage_progress_callback(stage_name, stage_position[0], stage_position[1])
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)

    def _on_stage_complete(self, stage_name: str) -> None:
        """Emit stage-complete event to the structured logger."""

        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name)

    def _on_stage_failure(self, stage_name: str, exc: Exception) -> None:
        """Emit stage-failure event naming the underlying error type."""

        if self._run_logger is None:
            return
        cause = exc.__cause__ if isinstance(exc, HukamnamaUnavailableError) else None
        error = cause if cause is not None else exc
        self._run_logger.log_stage_failure(stage_name, type(error).__name__)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        self._on_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            self._on_stage_failure(stage_name, exc)
            raise
        self._on_stage_complete(stage_name)
        return result
