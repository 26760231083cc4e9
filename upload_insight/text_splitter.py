"""Split extracted document text into fixed-size character chunks."""

from __future__ import annotations

from typing import List

from .config import CHUNK_SIZE
from .types import Chunk


class TextSplitter:
    """Non-overlapping character slices that cover the text exactly once.

    Slice size is a conservative stand-in for a token budget, not a token count.
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def split_text(self, text: str) -> List[Chunk]:
        return [
            Chunk(index=idx, start=start, text=text[start : start + self.chunk_size])
            for idx, start in enumerate(range(0, len(text), self.chunk_size), start=1)
        ]
