"""Turn value object — one speaker's contribution to the conversation."""

from typing import Literal

from pydantic import BaseModel

from toolchat.conversation.domain.content import ContentBlock, ToolInvocationBlock

type Speaker = Literal["user", "assistant"]


class Turn(BaseModel, frozen=True):
    """An ordered, immutable sequence of content blocks from one speaker.

    Tool results are recorded with speaker="user": the model protocol expects
    them in the human-role turn that follows an assistant tool-use turn.
    """

    speaker: Speaker
    blocks: tuple[ContentBlock, ...]

    def invocations(self) -> list[ToolInvocationBlock]:
        """Return the tool invocations of this turn, in order."""
        return [
            block for block in self.blocks if isinstance(block, ToolInvocationBlock)
        ]
