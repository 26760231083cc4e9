"""Generate a title and description for an uploaded image."""

from __future__ import annotations

import logging

from .config import MAX_UPLOAD_BYTES
from .model_client import ModelClient, call_model
from .prompts import IMAGE_PROMPT
from .types import BlobPart, ImageArtifact, RawContent, TextPart
from .uploads import ensure_image
from .validation import ArtifactKind, artifact_from_result

logger = logging.getLogger(__name__)


class ImageDescriber:
    """One model call per image, validated into an ImageArtifact."""

    def __init__(
        self,
        client: ModelClient,
        model: str,
        prompt: str = IMAGE_PROMPT,
        max_bytes: int = MAX_UPLOAD_BYTES,
    ) -> None:
        self.client = client
        self.model = model
        self.prompt = prompt
        self.max_bytes = max_bytes

    def describe(self, content: RawContent) -> ImageArtifact:
        ensure_image(content, self.max_bytes)
        parts = [TextPart(self.prompt), BlobPart(data=content.data, mime_type=content.mime_type)]
        logger.info("Describing %s image (%d bytes)", content.mime_type, content.size)
        result = call_model(self.client, parts, self.model, "image description")
        return artifact_from_result(result, ArtifactKind.IMAGE)
