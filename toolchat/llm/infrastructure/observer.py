"""Structlog implementation of the LanguageModelObserver port."""

import structlog


class StructlogLanguageModelObserver:
    """Delegates language-model events to structlog.

    Satisfies the LanguageModelObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def completion_started(self, model: str, turn_count: int, tool_count: int) -> None:
        self._log.info(
            "llm.completion_started",
            model=model,
            turn_count=turn_count,
            tool_count=tool_count,
        )

    def completion_completed(
        self, model: str, duration_ms: int, block_count: int
    ) -> None:
        self._log.info(
            "llm.completion_completed",
            model=model,
            duration_ms=duration_ms,
            block_count=block_count,
        )

    def completion_failed(self, model: str, reason: str) -> None:
        self._log.error("llm.completion_failed", model=model, reason=reason)
