"""Error types raised by language-model infrastructure."""

from toolchat.core.errors import ToolchatError


class LanguageModelError(ToolchatError):
    """Raised when the model call fails or its reply cannot be decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to call language model: {reason}")
