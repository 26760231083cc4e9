"""Recover a JSON value from noisy model output."""

from __future__ import annotations

import json
import re
from typing import Any, Optional

_FENCE_RE = re.compile(r"```(?:json)?")
_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text).strip()


def recover_json(text: Optional[str]) -> Optional[Any]:
    """Parse ``text`` strictly, then fall back to its outermost ``{...}`` span.

    Returns None when nothing parses. Never raises.
    """
    if not isinstance(text, str) or not text:
        return None
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except (ValueError, RecursionError):
        pass
    match = _OBJECT_RE.search(cleaned)
    if match is None:
        return None
    try:
        return json.loads(match.group(0))
    except (ValueError, RecursionError):
        return None
