"""Error types raised by the conversation domain."""

from toolchat.core.errors import ToolchatError


class EmptyToolResultsError(ToolchatError):
    """Raised when a tool-result turn is appended without any blocks."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to append tool results: a tool-result turn needs at least one block"
        )
