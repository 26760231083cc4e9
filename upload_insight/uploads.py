"""Read uploads from disk and gate them by type and size."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional

from .config import MAX_UPLOAD_BYTES
from .errors import InputRejectedError
from .types import RawContent

PDF_MIME_TYPE = "application/pdf"

# Missing from the mimetypes table before Python 3.11.
mimetypes.add_type("image/webp", ".webp")


def read_upload(path: Path, mime_type: Optional[str] = None, max_bytes: int = MAX_UPLOAD_BYTES) -> RawContent:
    path = Path(path)
    if not path.is_file():
        raise InputRejectedError(f"No file found at {path}.", reason="missing_file")
    if path.stat().st_size > max_bytes:
        raise _too_large("Upload", max_bytes)
    guessed, _ = mimetypes.guess_type(path.name)
    return RawContent(
        data=path.read_bytes(),
        mime_type=mime_type or guessed or "application/octet-stream",
        filename=path.name,
    )


def ensure_image(content: RawContent, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    if not content.mime_type.startswith("image/"):
        raise InputRejectedError("Uploaded file is not an image.", reason="not_image")
    _ensure_size(content, max_bytes, "Image")


def ensure_pdf(content: RawContent, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    named_pdf = bool(content.filename) and content.filename.lower().endswith(".pdf")
    if content.mime_type != PDF_MIME_TYPE and not named_pdf:
        raise InputRejectedError("Uploaded file is not a PDF.", reason="not_pdf")
    _ensure_size(content, max_bytes, "PDF")


def _ensure_size(content: RawContent, max_bytes: int, label: str) -> None:
    if content.size > max_bytes:
        raise _too_large(label, max_bytes)


def _too_large(label: str, max_bytes: int) -> InputRejectedError:
    return InputRejectedError(
        f"{label} exceeds maximum size of {max_bytes // (1024 * 1024)}MB.",
        reason="too_large",
    )
