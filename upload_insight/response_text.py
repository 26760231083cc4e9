"""Pull the text payload out of whatever a model call returned.

Result shapes differ across SDK versions and providers, so extraction is an
ordered tuple of strategies. The first strategy that yields a value wins.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional, Tuple

Strategy = Callable[[Any], Optional[str]]


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _first(obj: Any) -> Any:
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)) and obj:
        return obj[0]
    return None


def _first_candidate_content(result: Any) -> Any:
    return _field(_first(_field(result, "candidates")), "content")


def _text_accessor(result: Any) -> Optional[str]:
    accessor = _field(result, "text")
    if isinstance(accessor, str):
        return accessor
    if callable(accessor):
        text = accessor()
        return None if text is None else str(text)
    return None


def _candidate_part_text(result: Any) -> Optional[str]:
    text = _field(_first(_field(_first_candidate_content(result), "parts")), "text")
    return text if isinstance(text, str) and text else None


def _candidate_content_text(result: Any) -> Optional[str]:
    text = _field(_first_candidate_content(result), "text")
    return text if isinstance(text, str) and text else None


def _output_text(result: Any) -> Optional[str]:
    text = _field(result, "output_text")
    return text if isinstance(text, str) and text else None


def _message_content(result: Any) -> Optional[str]:
    if isinstance(result, (str, Mapping)):
        return None
    content = getattr(result, "content", None)
    return content if isinstance(content, str) and content else None


def _plain_string(result: Any) -> Optional[str]:
    return result if isinstance(result, str) else None


def _serialized(result: Any) -> Optional[str]:
    # Diagnostic only: a stringified result rarely contains recoverable JSON.
    try:
        return json.dumps(result, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(result)


STRATEGIES: Tuple[Strategy, ...] = (
    _text_accessor,
    _candidate_part_text,
    _candidate_content_text,
    _output_text,
    _message_content,
    _plain_string,
    _serialized,
)


def extract_text(result: Any, strategies: Sequence[Strategy] = STRATEGIES) -> Optional[str]:
    """Return the best available text for ``result`` or None when it is absent."""
    if result is None:
        return None
    for strategy in strategies:
        text = strategy(result)
        if text is not None:
            return text
    return None
