"""LanguageModelObserver port — domain events emitted around model calls."""

from typing import Protocol


class LanguageModelObserver(Protocol):
    def completion_started(
        self, model: str, turn_count: int, tool_count: int
    ) -> None: ...

    def completion_completed(
        self, model: str, duration_ms: int, block_count: int
    ) -> None: ...

    def completion_failed(self, model: str, reason: str) -> None: ...
