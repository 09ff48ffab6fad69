"""ToolObserver port — domain events emitted while dispatching tool invocations."""

from typing import Protocol


class ToolObserver(Protocol):
    """Observer port for tool domain events.

    Implementations may log to structlog or record for tests.
    """

    def tool_registered(self, tool_name: str) -> None: ...

    def tool_dispatched(self, tool_use_id: str, tool_name: str) -> None: ...

    def tool_completed(
        self, tool_use_id: str, tool_name: str, is_error: bool, duration_ms: int
    ) -> None: ...

    def tool_not_found(self, tool_use_id: str, tool_name: str) -> None: ...

    def tool_result_missing(self, tool_use_id: str, tool_name: str) -> None: ...

    def tool_result_discarded(
        self, tool_use_id: str, tool_name: str, stray_id: str
    ) -> None: ...

    def tool_failed(self, tool_use_id: str, tool_name: str, reason: str) -> None: ...


class ToolProviderObserver(Protocol):
    """Observer port for remote tool-provider session events."""

    def provider_connected(self, server: str) -> None: ...

    def provider_connection_failed(self, server: str, reason: str) -> None: ...

    def provider_tools_listed(self, server: str, tool_names: list[str]) -> None: ...
