"""Common data structures for the upload insight pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr


@dataclass(frozen=True)
class RawContent:
    """An uploaded file held in memory for the length of one request."""

    data: bytes
    mime_type: str
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class TextPart:
    """Plain text sent to the model."""

    text: str


@dataclass(frozen=True)
class BlobPart:
    """Inline binary content (an image) sent to the model."""

    data: bytes
    mime_type: str


ContentPart = Union[TextPart, BlobPart]


@dataclass(frozen=True)
class Chunk:
    """A fixed-size character slice of extracted document text."""

    index: int
    start: int
    text: str

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class BaseArtifact(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True, extra="ignore")

    def to_dict(self) -> dict:
        return self.model_dump()


class ImageArtifact(BaseArtifact):
    """Title and description generated for an image."""

    title: StrictStr = Field(min_length=1)
    description: StrictStr = Field(min_length=1)


class SummaryArtifact(BaseArtifact):
    """Summary of a document, a chunk, or a set of chunk summaries."""

    summary: StrictStr = Field(min_length=1)


Artifact = Union[ImageArtifact, SummaryArtifact]
