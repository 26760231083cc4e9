"""Enforce the required-keys contract for each artifact kind."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Optional, Type

from pydantic import ValidationError

from .errors import ExtractionEmptyError, RecoveryFailedError, ValidationFailedError
from .json_recovery import recover_json
from .response_text import extract_text
from .types import Artifact, BaseArtifact, ImageArtifact, SummaryArtifact

logger = logging.getLogger(__name__)


class ArtifactKind(str, Enum):
    IMAGE = "image"
    SUMMARY = "summary"


_MODELS: Dict[ArtifactKind, Type[BaseArtifact]] = {
    ArtifactKind.IMAGE: ImageArtifact,
    ArtifactKind.SUMMARY: SummaryArtifact,
}


def validate_artifact(parsed: Any, kind: ArtifactKind, raw_text: Optional[str] = None) -> Artifact:
    """Return a trimmed artifact of ``kind`` or raise ValidationFailedError.

    A single invalid field rejects the whole artifact.
    """
    model = _MODELS[kind]
    try:
        return model.model_validate(parsed)
    except ValidationError as exc:
        logger.error("Model JSON failed %s validation: %s", kind.value, exc.errors(include_url=False))
        raise ValidationFailedError(
            "Model returned JSON but required keys are missing or invalid.",
            parsed=parsed,
            raw_text=raw_text,
        ) from exc


def artifact_from_result(result: Any, kind: ArtifactKind) -> Artifact:
    """Run extract -> recover -> validate over a raw model-call result."""
    text = extract_text(result)
    if text is None or not text.strip():
        raise ExtractionEmptyError("Model response contained no text.", raw_text=text)
    parsed = recover_json(text)
    if parsed is None:
        logger.error("Failed to parse JSON from model response. Raw output: %s", text)
        raise RecoveryFailedError("Failed to parse the model's JSON response.", raw_text=text)
    return validate_artifact(parsed, kind, raw_text=text)
