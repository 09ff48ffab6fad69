"""ToolProvider Protocol — the narrow contract of a remote tool-provider session."""

from typing import Protocol

from pydantic import BaseModel

from toolchat.conversation.domain.content import ResultContentBlock
from toolchat.tool.domain.definition import ToolDefinition


class ToolCallOutcome(BaseModel, frozen=True):
    """Reply of a remote tool call, already mapped to content blocks."""

    content: tuple[ResultContentBlock, ...]
    is_error: bool | None = None


class ToolProvider(Protocol):
    """One established session with a remote tool provider.

    A session serves one outstanding call at a time.
    """

    @property
    def name(self) -> str: ...

    async def list_tools(self) -> list[ToolDefinition]: ...

    async def call_tool(
        self, name: str, arguments: dict[str, object]
    ) -> ToolCallOutcome: ...
