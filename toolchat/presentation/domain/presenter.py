"""Presenter Protocol — display side of the conversation."""

from typing import Protocol

from toolchat.conversation.domain.content import (
    TextBlock,
    ToolInvocationBlock,
    ToolResultBlock,
)


class Presenter(Protocol):
    """Receives every produced block, in processing order.

    Display only: nothing a presenter does may change what is sent to the model.
    """

    def show_text(self, block: TextBlock) -> None: ...

    def show_tool_invocation(self, block: ToolInvocationBlock) -> None: ...

    def show_tool_result(self, block: ToolResultBlock) -> None: ...
