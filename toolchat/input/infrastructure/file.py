"""FileInputSource — uses a prompt file as the first user turn."""

from pathlib import Path

from rich.console import Console

from toolchat.input.domain.source import InputSource
from toolchat.input.infrastructure.errors import PromptFileError


class FileInputSource:
    """Returns the whole prompt file once, then delegates to a fallback source.

    The file is read at construction so a bad path fails at startup. An empty
    file is skipped.
    """

    def __init__(self, path: Path, fallback: InputSource, console: Console) -> None:
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PromptFileError(path=path, reason=str(exc)) from exc
        self._pending: str | None = contents or None
        self._fallback = fallback
        self._console = console

    async def read_line(self) -> str:
        if self._pending is not None:
            text, self._pending = self._pending, None
            self._console.print(text, markup=False, highlight=False)
            return text
        return await self._fallback.read_line()
