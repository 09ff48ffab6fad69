"""InputSource Protocol — where the next user turn comes from."""

from typing import Protocol


class InputSource(Protocol):
    """Supplies user input one line (or one prompt) at a time.

    `read_line` suspends until input is available and raises
    InputExhaustedError once the source can produce no more input.
    """

    async def read_line(self) -> str: ...
