"""Tool Protocol — structural interface for every executable tool."""

from typing import Protocol

from toolchat.conversation.domain.content import ContentBlock, ToolInvocationBlock
from toolchat.tool.domain.definition import ToolDefinition


class Tool(Protocol):
    """A capability the model may invoke.

    `execute` returns the blocks produced for one invocation: normally a single
    ToolResultBlock correlated by tool_use_id, optionally with auxiliary blocks.
    Recoverable failures are reported as is_error results, never raised.
    """

    @property
    def definition(self) -> ToolDefinition: ...

    async def execute(self, invocation: ToolInvocationBlock) -> list[ContentBlock]: ...
