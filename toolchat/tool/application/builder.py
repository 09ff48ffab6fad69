"""Registry assembly — collects built-in and provider-backed tools at startup."""

from collections.abc import Sequence

from toolchat.config.domain.terminal_tool import TerminalToolConfig
from toolchat.tool.domain.observer import ToolObserver
from toolchat.tool.domain.provider import ToolProvider
from toolchat.tool.domain.registry import ToolRegistry
from toolchat.tool.domain.tool import Tool
from toolchat.tool.infrastructure.mcp_tool import McpTool
from toolchat.tool.infrastructure.terminal import RunTerminalCommandTool


async def build_tool_registry(
    terminal_tool: TerminalToolConfig,
    providers: Sequence[ToolProvider],
    observer: ToolObserver,
) -> ToolRegistry:
    """Build the registry once, before the conversation loop starts.

    Each provider is asked for its tools exactly once; the built-in terminal
    tool comes first when enabled.

    Raises:
        ToolProviderError: if a provider cannot list its tools.
        DuplicateToolError: if two tools share a name.
    """
    tools: list[Tool] = []
    if terminal_tool.enabled:
        tools.append(RunTerminalCommandTool(config=terminal_tool))

    for provider in providers:
        definitions = await provider.list_tools()
        tools.extend(
            McpTool(provider=provider, definition=definition)
            for definition in definitions
        )

    return ToolRegistry(tools=tools, observer=observer)
