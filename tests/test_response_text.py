"""Tests for text extraction from model-call results."""

from types import SimpleNamespace

from langchain_core.messages import AIMessage

from upload_insight.response_text import extract_text


class TestExtractText:
    """Each known result shape resolves through the first matching strategy."""

    def test_none_result(self):
        assert extract_text(None) is None

    def test_callable_text_accessor_wins(self):
        result = SimpleNamespace(
            text=lambda: "from accessor",
            output_text="from output_text",
        )
        assert extract_text(result) == "from accessor"

    def test_text_property_string(self):
        assert extract_text(SimpleNamespace(text="from property")) == "from property"

    def test_langchain_message(self):
        assert extract_text(AIMessage(content='{"summary": "x"}')) == '{"summary": "x"}'

    def test_candidate_part_text_mapping(self):
        result = {"candidates": [{"content": {"parts": [{"text": "part text"}]}}]}
        assert extract_text(result) == "part text"

    def test_candidate_part_text_attributes(self):
        part = SimpleNamespace(text="attr part")
        content = SimpleNamespace(parts=[part])
        result = SimpleNamespace(text=None, candidates=[SimpleNamespace(content=content)])
        assert extract_text(result) == "attr part"

    def test_candidate_content_text(self):
        result = {"candidates": [{"content": {"parts": [], "text": "content text"}}]}
        assert extract_text(result) == "content text"

    def test_output_text(self):
        assert extract_text({"candidates": [], "output_text": "out"}) == "out"

    def test_plain_string(self):
        assert extract_text("raw reply") == "raw reply"

    def test_unknown_shape_is_serialized(self):
        """Missing intermediate fields fall through without raising."""
        result = {"candidates": [{"content": None}], "status": "done"}
        assert extract_text(result) == '{"candidates": [{"content": null}], "status": "done"}'

    def test_unknown_object_is_stringified(self):
        result = SimpleNamespace(status="odd")
        assert extract_text(result) == '"namespace(status=\'odd\')"'
