"""AgentObserver port — domain events emitted by the conversation loop."""

from typing import Protocol


class AgentObserver(Protocol):
    """Observer port for conversation-loop events.

    Implementations may log to structlog or record for tests.
    """

    def input_awaited(self, turn_count: int) -> None: ...

    def input_received(self, turn_count: int, length: int) -> None: ...

    def input_exhausted(self, turn_count: int) -> None: ...

    def response_received(
        self, turn_count: int, block_count: int, invocation_count: int
    ) -> None: ...

    def tool_results_appended(self, turn_count: int, block_count: int) -> None: ...

    def presentation_failed(self, block_type: str, reason: str) -> None: ...
