"""Completion request and response value objects exchanged with the model service."""

from typing import Literal

from pydantic import BaseModel, Field

from toolchat.conversation.domain.content import ContentBlock, ToolInvocationBlock
from toolchat.conversation.domain.turn import Turn
from toolchat.tool.domain.definition import ToolDefinition


class CompletionRequest(BaseModel, frozen=True):
    """Everything the model sees for one round trip."""

    history: tuple[Turn, ...]
    tools: tuple[ToolDefinition, ...] = ()
    system_prompt: str | None = None
    max_output_tokens: int = Field(ge=1)


class CompletionResponse(BaseModel, frozen=True):
    """A complete (non-streamed) assistant reply."""

    speaker: Literal["assistant"] = "assistant"
    blocks: tuple[ContentBlock, ...]

    def invocations(self) -> list[ToolInvocationBlock]:
        return [b for b in self.blocks if isinstance(b, ToolInvocationBlock)]
