"""McpTool — bridges one tool exposed by a remote tool-provider session."""

from toolchat.conversation.domain.content import (
    ContentBlock,
    ToolInvocationBlock,
    ToolResultBlock,
    error_result,
)
from toolchat.tool.domain.definition import ToolDefinition
from toolchat.tool.domain.errors import ToolProviderError
from toolchat.tool.domain.provider import ToolProvider


class McpTool:
    """Forwards invocations to the provider that advertised the tool.

    The provider's reply content and error flag are mapped directly into a
    single ToolResultBlock. A provider-side failure becomes an is_error result.
    """

    def __init__(self, provider: ToolProvider, definition: ToolDefinition) -> None:
        self._provider = provider
        self._definition = definition

    @property
    def definition(self) -> ToolDefinition:
        return self._definition

    async def execute(self, invocation: ToolInvocationBlock) -> list[ContentBlock]:
        try:
            outcome = await self._provider.call_tool(
                name=invocation.name, arguments=dict(invocation.input)
            )
        except ToolProviderError as exc:
            return [error_result(tool_use_id=invocation.id, message=str(exc))]

        return [
            ToolResultBlock(
                tool_use_id=invocation.id,
                content=outcome.content,
                is_error=bool(outcome.is_error),
            )
        ]
