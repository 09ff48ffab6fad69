"""Content block models — discriminated union on the `type` field."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

type JsonObject = dict[str, object]


class TextBlock(BaseModel, frozen=True):
    """Plain text produced by the user, the model, or a tool."""

    type: Literal["text"] = "text"
    text: str


class ImageBlock(BaseModel, frozen=True):
    """Base64-encoded image, returned by some remote tools."""

    type: Literal["image"] = "image"
    data: str
    mime_type: str


class ToolInvocationBlock(BaseModel, frozen=True):
    """A model-issued request to run a named tool with structured input.

    `id` is unique within one model response and correlates the invocation
    with its ToolResultBlock.
    """

    type: Literal["tool_use"] = "tool_use"
    id: str = Field(min_length=1)
    name: str
    input: JsonObject = Field(default_factory=dict)


# Blocks allowed inside a tool result's structured content.
type ResultContentBlock = Annotated[
    TextBlock | ImageBlock,
    Field(discriminator="type"),
]


class ToolResultBlock(BaseModel, frozen=True):
    """Outcome of executing one ToolInvocationBlock."""

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str = Field(min_length=1)
    content: str | tuple[ResultContentBlock, ...] = ""
    is_error: bool = False

    def text(self) -> str:
        """Return the textual part of the content, image blocks omitted."""
        if isinstance(self.content, str):
            return self.content
        return "".join(
            block.text for block in self.content if isinstance(block, TextBlock)
        )


type ContentBlock = Annotated[
    TextBlock | ImageBlock | ToolInvocationBlock | ToolResultBlock,
    Field(discriminator="type"),
]


def error_result(tool_use_id: str, message: str) -> ToolResultBlock:
    """Build an is_error ToolResultBlock carrying a plain-text message."""
    return ToolResultBlock(tool_use_id=tool_use_id, content=message, is_error=True)
