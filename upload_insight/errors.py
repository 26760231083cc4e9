"""Failure types raised by the pipelines.

Every failure carries a ``stage`` tag so callers can tell input problems,
content problems (extraction, recovery, validation), reduction failures and
provider failures apart. ``to_dict`` renders the error object handed back to
whoever invoked the pipeline.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PipelineError(RuntimeError):
    """Base class for every pipeline failure."""

    stage = "pipeline"

    def __init__(
        self,
        message: str,
        *,
        raw_text: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.raw_text = raw_text
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message, "stage": self.stage}
        if self.raw_text is not None:
            payload["rawResponse"] = self.raw_text
        if self.details:
            payload["details"] = self.details
        return payload


class InputRejectedError(PipelineError):
    """The upload was refused before any model call was made."""

    stage = "input"

    def __init__(self, message: str, *, reason: str, details: Optional[str] = None) -> None:
        super().__init__(message, details=details)
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["reason"] = self.reason
        return payload


class NoExtractableTextError(InputRejectedError):
    """The PDF contained no selectable text."""

    def __init__(self) -> None:
        super().__init__(
            "No selectable text found in PDF. If the PDF is scanned, upload a text-based PDF.",
            reason="no_text",
        )


class ExtractionEmptyError(PipelineError):
    stage = "extraction"


class RecoveryFailedError(PipelineError):
    stage = "recovery"


class ValidationFailedError(PipelineError):
    """The model returned JSON without the required keys."""

    stage = "validation"

    def __init__(self, message: str, *, parsed: Any, raw_text: Optional[str] = None) -> None:
        super().__init__(message, raw_text=raw_text)
        self.parsed = parsed

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["modelJson"] = self.parsed
        return payload


class ChunkFailedError(PipelineError):
    """Summarizing one chunk failed, which aborts the whole document."""

    stage = "chunk"

    def __init__(self, chunk_index: int, chunk_count: int, cause: PipelineError) -> None:
        super().__init__(
            f"Failed to summarize PDF chunk {chunk_index} of {chunk_count}: {cause.message}",
            raw_text=cause.raw_text,
        )
        self.chunk_index = chunk_index
        self.chunk_count = chunk_count
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["chunk"] = self.chunk_index
        payload["causeStage"] = self.cause.stage
        return payload


class CombineFailedError(PipelineError):
    """Merging the chunk summaries into one summary failed."""

    stage = "combine"

    def __init__(self, cause: PipelineError) -> None:
        super().__init__(
            f"Failed to combine chunk summaries: {cause.message}",
            raw_text=cause.raw_text,
        )
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["causeStage"] = self.cause.stage
        return payload


class ModelCallError(PipelineError):
    """The model provider raised (network, auth, quota)."""

    stage = "transport"

    def __init__(self, context: str, error: BaseException) -> None:
        super().__init__(f"Model call failed during {context}.", details=str(error) or repr(error))
        self.context = context
