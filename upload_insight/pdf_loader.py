"""Extract selectable text from an in-memory PDF."""

from __future__ import annotations

import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .errors import InputRejectedError

logger = logging.getLogger(__name__)


class PdfTextExtractor:
    """Reads PDF bytes with pypdf and joins page text in page order."""

    def extract(self, buffer: bytes) -> str:
        try:
            reader = PdfReader(io.BytesIO(buffer))
            pages = [page.extract_text() or "" for page in reader.pages]
        except PdfReadError as exc:
            logger.warning("Unreadable PDF upload: %s", exc)
            raise InputRejectedError(
                "Uploaded file could not be read as a PDF.",
                reason="unreadable",
                details=str(exc),
            ) from exc
        logger.debug("Extracted text from %d PDF pages", len(pages))
        return "\n".join(pages)
