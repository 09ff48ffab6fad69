"""Tests for content block models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from toolchat.conversation.domain.content import (
    ContentBlock,
    ImageBlock,
    TextBlock,
    ToolInvocationBlock,
    ToolResultBlock,
    error_result,
)


class TestContentBlockDiscriminator:
    """Raw dicts are routed to the right block type by the `type` field."""

    def _validate(self, raw: dict[str, object]) -> ContentBlock:
        return TypeAdapter(ContentBlock).validate_python(raw)

    def test_text(self) -> None:
        block = self._validate({"type": "text", "text": "hello"})
        assert isinstance(block, TextBlock)
        assert block.text == "hello"

    def test_tool_use(self) -> None:
        block = self._validate(
            {"type": "tool_use", "id": "t1", "name": "ls", "input": {"a": 1}}
        )
        assert isinstance(block, ToolInvocationBlock)
        assert block.input == {"a": 1}

    def test_tool_result(self) -> None:
        block = self._validate(
            {"type": "tool_result", "tool_use_id": "t1", "content": "out"}
        )
        assert isinstance(block, ToolResultBlock)
        assert block.is_error is False

    def test_image(self) -> None:
        block = self._validate(
            {"type": "image", "data": "aGk=", "mime_type": "image/png"}
        )
        assert isinstance(block, ImageBlock)

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._validate({"type": "audio", "data": "x"})


class TestToolInvocationBlock:
    def test_input_defaults_to_empty_object(self) -> None:
        assert ToolInvocationBlock(id="t1", name="ls").input == {}

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ToolInvocationBlock(id="", name="ls")

    def test_is_frozen(self) -> None:
        block = ToolInvocationBlock(id="t1", name="ls")
        with pytest.raises(ValidationError):
            block.name = "rm"  # type: ignore[misc]


class TestToolResultBlock:
    def test_text_of_string_content(self) -> None:
        block = ToolResultBlock(tool_use_id="t1", content="hi\n")
        assert block.text() == "hi\n"

    def test_text_skips_images(self) -> None:
        block = ToolResultBlock(
            tool_use_id="t1",
            content=(
                TextBlock(text="a"),
                ImageBlock(data="aGk=", mime_type="image/png"),
                TextBlock(text="b"),
            ),
        )
        assert block.text() == "ab"

    def test_structured_content_from_raw_list(self) -> None:
        block = ToolResultBlock.model_validate(
            {
                "tool_use_id": "t1",
                "content": [{"type": "text", "text": "x"}],
            }
        )
        assert block.content == (TextBlock(text="x"),)

    def test_content_defaults_to_empty_string(self) -> None:
        assert ToolResultBlock(tool_use_id="t1").content == ""


class TestErrorResult:
    def test_builds_error_result(self) -> None:
        block = error_result(tool_use_id="t9", message="Unsupported tool: nope")
        assert block.tool_use_id == "t9"
        assert block.content == "Unsupported tool: nope"
        assert block.is_error is True
