"""Structlog implementations of the ToolObserver and ToolProviderObserver ports."""

import structlog


class StructlogToolObserver:
    """Delegates tool dispatch events to structlog.

    Satisfies the ToolObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def tool_registered(self, tool_name: str) -> None:
        self._log.debug("tool.registered", tool_name=tool_name)

    def tool_dispatched(self, tool_use_id: str, tool_name: str) -> None:
        self._log.info("tool.dispatched", tool_use_id=tool_use_id, tool_name=tool_name)

    def tool_completed(
        self, tool_use_id: str, tool_name: str, is_error: bool, duration_ms: int
    ) -> None:
        self._log.info(
            "tool.completed",
            tool_use_id=tool_use_id,
            tool_name=tool_name,
            is_error=is_error,
            duration_ms=duration_ms,
        )

    def tool_not_found(self, tool_use_id: str, tool_name: str) -> None:
        self._log.warning(
            "tool.not_found", tool_use_id=tool_use_id, tool_name=tool_name
        )

    def tool_result_missing(self, tool_use_id: str, tool_name: str) -> None:
        self._log.warning(
            "tool.result_missing", tool_use_id=tool_use_id, tool_name=tool_name
        )

    def tool_result_discarded(
        self, tool_use_id: str, tool_name: str, stray_id: str
    ) -> None:
        self._log.warning(
            "tool.result_discarded",
            tool_use_id=tool_use_id,
            tool_name=tool_name,
            stray_id=stray_id,
        )

    def tool_failed(self, tool_use_id: str, tool_name: str, reason: str) -> None:
        self._log.error(
            "tool.failed", tool_use_id=tool_use_id, tool_name=tool_name, reason=reason
        )


class StructlogToolProviderObserver:
    """Delegates tool-provider session events to structlog.

    Satisfies the ToolProviderObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def provider_connected(self, server: str) -> None:
        self._log.info("tool_provider.connected", server=server)

    def provider_connection_failed(self, server: str, reason: str) -> None:
        self._log.error("tool_provider.connection_failed", server=server, reason=reason)

    def provider_tools_listed(self, server: str, tool_names: list[str]) -> None:
        self._log.info(
            "tool_provider.tools_listed",
            server=server,
            tool_count=len(tool_names),
            tool_names=tool_names,
        )
