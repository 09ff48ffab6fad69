"""Base exception class for all toolchat-specific errors."""


class ToolchatError(Exception):
    """Base class for all toolchat errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
