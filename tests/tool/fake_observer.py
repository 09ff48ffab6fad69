"""Fake tool observers — record tool and provider events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolDispatchedEvent:
    tool_use_id: str
    tool_name: str


@dataclass(frozen=True)
class ToolCompletedEvent:
    tool_use_id: str
    tool_name: str
    is_error: bool
    duration_ms: int


@dataclass(frozen=True)
class ToolNotFoundEvent:
    tool_use_id: str
    tool_name: str


@dataclass(frozen=True)
class ToolResultMissingEvent:
    tool_use_id: str
    tool_name: str


@dataclass(frozen=True)
class ToolResultDiscardedEvent:
    tool_use_id: str
    tool_name: str
    stray_id: str


@dataclass(frozen=True)
class ToolFailedEvent:
    tool_use_id: str
    tool_name: str
    reason: str


class FakeToolObserver:
    """Records all emitted tool events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.registered: list[str] = []
        self.dispatched: list[ToolDispatchedEvent] = []
        self.completed: list[ToolCompletedEvent] = []
        self.not_found: list[ToolNotFoundEvent] = []
        self.result_missing: list[ToolResultMissingEvent] = []
        self.result_discarded: list[ToolResultDiscardedEvent] = []
        self.failed: list[ToolFailedEvent] = []

    def tool_registered(self, tool_name: str) -> None:
        self.registered.append(tool_name)

    def tool_dispatched(self, tool_use_id: str, tool_name: str) -> None:
        self.dispatched.append(
            ToolDispatchedEvent(tool_use_id=tool_use_id, tool_name=tool_name)
        )

    def tool_completed(
        self, tool_use_id: str, tool_name: str, is_error: bool, duration_ms: int
    ) -> None:
        self.completed.append(
            ToolCompletedEvent(
                tool_use_id=tool_use_id,
                tool_name=tool_name,
                is_error=is_error,
                duration_ms=duration_ms,
            )
        )

    def tool_not_found(self, tool_use_id: str, tool_name: str) -> None:
        self.not_found.append(
            ToolNotFoundEvent(tool_use_id=tool_use_id, tool_name=tool_name)
        )

    def tool_result_missing(self, tool_use_id: str, tool_name: str) -> None:
        self.result_missing.append(
            ToolResultMissingEvent(tool_use_id=tool_use_id, tool_name=tool_name)
        )

    def tool_result_discarded(
        self, tool_use_id: str, tool_name: str, stray_id: str
    ) -> None:
        self.result_discarded.append(
            ToolResultDiscardedEvent(
                tool_use_id=tool_use_id, tool_name=tool_name, stray_id=stray_id
            )
        )

    def tool_failed(self, tool_use_id: str, tool_name: str, reason: str) -> None:
        self.failed.append(
            ToolFailedEvent(tool_use_id=tool_use_id, tool_name=tool_name, reason=reason)
        )


@dataclass(frozen=True)
class ProviderConnectionFailedEvent:
    server: str
    reason: str


@dataclass(frozen=True)
class ProviderToolsListedEvent:
    server: str
    tool_names: list[str]


class FakeToolProviderObserver:
    """Records tool-provider session events."""

    def __init__(self) -> None:
        self.connected: list[str] = []
        self.connection_failed: list[ProviderConnectionFailedEvent] = []
        self.tools_listed: list[ProviderToolsListedEvent] = []

    def provider_connected(self, server: str) -> None:
        self.connected.append(server)

    def provider_connection_failed(self, server: str, reason: str) -> None:
        self.connection_failed.append(
            ProviderConnectionFailedEvent(server=server, reason=reason)
        )

    def provider_tools_listed(self, server: str, tool_names: list[str]) -> None:
        self.tools_listed.append(
            ProviderToolsListedEvent(server=server, tool_names=list(tool_names))
        )
