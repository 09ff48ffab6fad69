"""ConfigObserver port — domain events emitted while loading configuration."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str, model: str, mcp_servers: list[str]) -> None: ...
