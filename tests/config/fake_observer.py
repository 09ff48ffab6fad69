"""FakeConfigObserver — records config events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigLoadedEvent:
    path: str
    model: str
    mcp_servers: list[str]


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[ConfigLoadedEvent] = []

    def config_loaded(self, path: str, model: str, mcp_servers: list[str]) -> None:
        self.loaded.append(
            ConfigLoadedEvent(path=path, model=model, mcp_servers=list(mcp_servers))
        )
