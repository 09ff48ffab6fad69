"""StdinInputSource — interactive input from the terminal."""

import asyncio

from rich.console import Console

from toolchat.input.domain.errors import InputExhaustedError

_PROMPT = "[bold red]You[/bold red]: "


class StdinInputSource:
    """Prompts on the console and reads one line.

    The blocking read runs in a worker thread so the event loop stays free.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    async def read_line(self) -> str:
        """Raises InputExhaustedError on end of file."""
        try:
            return await asyncio.to_thread(self._console.input, _PROMPT)
        except EOFError as exc:
            raise InputExhaustedError() from exc
