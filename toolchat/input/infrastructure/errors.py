"""Error types raised by input infrastructure."""

from pathlib import Path

from toolchat.core.errors import ToolchatError


class PromptFileError(ToolchatError):
    """Raised when the initial prompt file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to read prompt file {path}: {reason}")
