"""Error types raised by input sources."""

from toolchat.core.errors import ToolchatError


class InputExhaustedError(ToolchatError):
    """Raised when an input source has no more input. Ends the conversation loop."""

    def __init__(self) -> None:
        super().__init__("Failed to read user input: input source is exhausted")
