"""Summarize extracted PDF text with a chunk / summarize / combine reduction."""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import CHUNK_SIZE, ELLIPSIS, MAX_SUMMARY_CHARS, MAX_UPLOAD_BYTES
from .errors import ChunkFailedError, CombineFailedError, NoExtractableTextError, PipelineError
from .model_client import ModelClient, call_model
from .pdf_loader import PdfTextExtractor
from .prompts import CHUNK_SUMMARY_PROMPT, COMBINE_PROMPT
from .text_splitter import TextSplitter
from .types import Chunk, RawContent, SummaryArtifact, TextPart
from .uploads import ensure_pdf
from .validation import ArtifactKind, artifact_from_result

logger = logging.getLogger(__name__)


class DocumentSummarizer:
    """Summarize documents through a chat model, one call per chunk plus one combine."""

    def __init__(
        self,
        client: ModelClient,
        model: str,
        chunk_size: int = CHUNK_SIZE,
        max_summary_chars: int = MAX_SUMMARY_CHARS,
        max_bytes: int = MAX_UPLOAD_BYTES,
        extractor: Optional[PdfTextExtractor] = None,
    ) -> None:
        if max_summary_chars <= len(ELLIPSIS):
            raise ValueError("max_summary_chars must be longer than the ellipsis marker")
        self.client = client
        self.model = model
        self.max_summary_chars = max_summary_chars
        self.max_bytes = max_bytes
        self._splitter = TextSplitter(chunk_size=chunk_size)
        self._extractor = extractor or PdfTextExtractor()

    def summarize_pdf(self, content: RawContent) -> SummaryArtifact:
        ensure_pdf(content, self.max_bytes)
        return self.summarize(self._extractor.extract(content.data))

    def summarize(self, text: str) -> SummaryArtifact:
        text = (text or "").strip()
        if not text:
            raise NoExtractableTextError()
        chunks = self._splitter.split_text(text)
        logger.info("Summarizing %d characters in %d chunk(s)", len(text), len(chunks))
        partials = [self._summarize_chunk(chunk, len(chunks)) for chunk in chunks]
        if len(partials) == 1:
            summary = partials[0]
        else:
            summary = self._combine(partials)
        return SummaryArtifact(summary=cap_summary(summary, self.max_summary_chars))

    def _summarize_chunk(self, chunk: Chunk, total: int) -> str:
        context = f"chunk {chunk.index} of {total}"
        logger.debug("Summarizing %s (%d characters)", context, len(chunk.text))
        result = call_model(self.client, [TextPart(CHUNK_SUMMARY_PROMPT), TextPart(chunk.text)], self.model, context)
        try:
            artifact = artifact_from_result(result, ArtifactKind.SUMMARY)
        except PipelineError as exc:
            logger.error("Failed to parse summary for %s. Raw: %s", context, exc.raw_text)
            raise ChunkFailedError(chunk.index, total, exc) from exc
        return artifact.summary

    def _combine(self, partials: List[str]) -> str:
        merged = "\n\n".join(partials)
        result = call_model(self.client, [TextPart(COMBINE_PROMPT), TextPart(merged)], self.model, "combine")
        try:
            artifact = artifact_from_result(result, ArtifactKind.SUMMARY)
        except PipelineError as exc:
            logger.error("Failed to parse combined summary. Raw: %s", exc.raw_text)
            raise CombineFailedError(exc) from exc
        return artifact.summary


def cap_summary(summary: str, max_chars: int = MAX_SUMMARY_CHARS) -> str:
    """Hard ceiling on output size, independent of the model's own length."""
    if len(summary) <= max_chars:
        return summary
    return summary[: max_chars - len(ELLIPSIS)] + ELLIPSIS
