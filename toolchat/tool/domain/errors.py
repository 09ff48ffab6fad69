"""Error types raised by the tool domain."""

from toolchat.core.errors import ToolchatError


class DuplicateToolError(ToolchatError):
    """Raised when two tools with the same name are registered."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(
            f"Failed to build tool registry: duplicate tool name '{tool_name}'"
        )


class ToolProviderError(ToolchatError):
    """Raised when a remote tool provider cannot be reached or rejects a request."""

    def __init__(self, server: str, reason: str) -> None:
        self.server = server
        super().__init__(f"Failed to reach tool provider '{server}': {reason}")
