"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, model: str, mcp_servers: list[str]) -> None:
        self._log.info(
            "config.loaded", path=path, model=model, mcp_servers=mcp_servers
        )
