"""Tests for the single-shot image pipeline."""

from types import SimpleNamespace

import pytest

from upload_insight.errors import (
    ExtractionEmptyError,
    InputRejectedError,
    ModelCallError,
    RecoveryFailedError,
    ValidationFailedError,
)
from upload_insight.image_describer import ImageDescriber
from upload_insight.prompts import IMAGE_PROMPT
from upload_insight.types import BlobPart, RawContent, TextPart

PNG = RawContent(data=b"\x89PNG\r\n\x1a\nfake", mime_type="image/png", filename="cat.png")


class TestImageDescriber:
    def test_describe_returns_trimmed_artifact(self, scripted_client):
        reply = SimpleNamespace(text=lambda: 'Here you go: {"title": " Sleeping Cat ", "description": "A cat naps."}')
        client = scripted_client([reply])

        artifact = ImageDescriber(client, model="vision-model").describe(PNG)

        assert artifact.to_dict() == {"title": "Sleeping Cat", "description": "A cat naps."}
        parts, model = client.calls[0]
        assert model == "vision-model"
        assert parts == [TextPart(IMAGE_PROMPT), BlobPart(data=PNG.data, mime_type="image/png")]

    def test_non_image_rejected_before_call(self, scripted_client):
        client = scripted_client([])
        with pytest.raises(InputRejectedError) as exc_info:
            ImageDescriber(client, model="m").describe(RawContent(data=b"%PDF", mime_type="application/pdf"))
        assert exc_info.value.reason == "not_image"
        assert client.calls == []

    def test_oversize_image_rejected(self, scripted_client):
        client = scripted_client([])
        describer = ImageDescriber(client, model="m", max_bytes=3)
        with pytest.raises(InputRejectedError) as exc_info:
            describer.describe(PNG)
        assert exc_info.value.reason == "too_large"
        assert exc_info.value.to_dict()["stage"] == "input"

    @pytest.mark.parametrize(
        "reply, error_type",
        [
            ({"candidates": [{"content": {"parts": [{"text": "   "}]}}], "text": ""}, ExtractionEmptyError),
            ("I cannot help with that.", RecoveryFailedError),
            ('{"title": "Only a title"}', ValidationFailedError),
        ],
    )
    def test_stage_failures(self, scripted_client, reply, error_type):
        with pytest.raises(error_type):
            ImageDescriber(scripted_client([reply]), model="m").describe(PNG)

    def test_provider_error(self, scripted_client):
        client = scripted_client([PermissionError("invalid API key")])
        with pytest.raises(ModelCallError) as exc_info:
            ImageDescriber(client, model="m").describe(PNG)
        assert exc_info.value.to_dict() == {
            "error": "Model call failed during image description.",
            "stage": "transport",
            "details": "invalid API key",
        }
