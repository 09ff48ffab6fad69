"""Structlog implementation of the AgentObserver port."""

import structlog


class StructlogAgentObserver:
    """Delegates conversation-loop events to structlog.

    Satisfies the AgentObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def input_awaited(self, turn_count: int) -> None:
        self._log.debug("agent.input_awaited", turn_count=turn_count)

    def input_received(self, turn_count: int, length: int) -> None:
        self._log.info("agent.input_received", turn_count=turn_count, length=length)

    def input_exhausted(self, turn_count: int) -> None:
        self._log.info("agent.input_exhausted", turn_count=turn_count)

    def response_received(
        self, turn_count: int, block_count: int, invocation_count: int
    ) -> None:
        self._log.info(
            "agent.response_received",
            turn_count=turn_count,
            block_count=block_count,
            invocation_count=invocation_count,
        )

    def tool_results_appended(self, turn_count: int, block_count: int) -> None:
        self._log.info(
            "agent.tool_results_appended",
            turn_count=turn_count,
            block_count=block_count,
        )

    def presentation_failed(self, block_type: str, reason: str) -> None:
        self._log.warning(
            "agent.presentation_failed", block_type=block_type, reason=reason
        )
