"""Shared fixtures for pipeline tests."""

from typing import Any, List, Sequence

import pytest

from upload_insight.types import ContentPart


class ScriptedModelClient:
    """Returns queued results in order and records every submitted request."""

    def __init__(self, results: Sequence[Any]) -> None:
        self._results = list(results)
        self.calls: List[tuple] = []

    def submit(self, parts: Sequence[ContentPart], model: str) -> Any:
        self.calls.append((list(parts), model))
        result = self._results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def scripted_client():
    """Factory for a client that replays the given results."""
    return ScriptedModelClient
