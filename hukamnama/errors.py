"""Domain exceptions for pipeline and CLI diagnostics."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class HukamnamaUnavailableError(PipelineStageError):
    """Raised when today's Hukamnama could not be acquired or extracted.

    The underlying fetch or extraction failure is chained as `__cause__` and is
    never rendered into a partial transcript.
    """

    DETAIL = "Hukamnama unavailable."

    def __init__(self, *, stage: str, hint: str | None = None) -> None:
        """Initialize the opaque unavailability error for one failed stage."""

        super().__init__(stage=stage, detail=self.DETAIL, hint=hint)
