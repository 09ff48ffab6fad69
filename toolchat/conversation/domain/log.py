"""ConversationLog — the append-only transcript submitted to the model."""

from collections.abc import Iterator, Sequence

from toolchat.conversation.domain.content import ContentBlock, TextBlock
from toolchat.conversation.domain.errors import EmptyToolResultsError
from toolchat.conversation.domain.turn import Turn


class ConversationLog:
    """Ordered sequence of Turns. Append is the only mutation.

    Turns are frozen models holding tuples, so a turn cannot change after it
    has been appended, and no operation removes or reorders turns.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []

    def append_user_text(self, text: str) -> Turn:
        turn = Turn(speaker="user", blocks=(TextBlock(text=text),))
        self._turns.append(turn)
        return turn

    def append_assistant(self, blocks: Sequence[ContentBlock]) -> Turn:
        turn = Turn(speaker="assistant", blocks=tuple(blocks))
        self._turns.append(turn)
        return turn

    def append_tool_results(self, blocks: Sequence[ContentBlock]) -> Turn:
        """Record tool results as a single user-speaker turn.

        Raises:
            EmptyToolResultsError: if blocks is empty.
        """
        if not blocks:
            raise EmptyToolResultsError()
        turn = Turn(speaker="user", blocks=tuple(blocks))
        self._turns.append(turn)
        return turn

    def to_history(self) -> tuple[Turn, ...]:
        """Return an immutable snapshot of every turn, oldest first."""
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))
