"""Connection settings for the MCP servers whose tools are bridged into the registry."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_REMOTE_TIMEOUT_SECONDS = 30.0


class StdioMcpServer(BaseModel, frozen=True):
    """A server toolchat starts itself and talks to over stdin/stdout.

    `env` is layered over the MCP SDK's safe default environment; `cwd` is the
    working directory of the server process (inherited when unset).
    """

    type: Literal["stdio"]
    command: str = Field(min_length=1)
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
    cwd: Path | None = None


class _RemoteMcpServer(BaseModel, frozen=True):
    url: str = Field(min_length=1)
    headers: dict[str, str] = Field(default_factory=dict)
    timeout_seconds: float = Field(default=DEFAULT_REMOTE_TIMEOUT_SECONDS, gt=0)

    @field_validator("url")
    @classmethod
    def _require_http_scheme(cls, url: str) -> str:
        if not url.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return url


class SseMcpServer(_RemoteMcpServer, frozen=True):
    """A running server reached over HTTP with Server-Sent Events."""

    type: Literal["sse"]


class HttpMcpServer(_RemoteMcpServer, frozen=True):
    """A running server reached over streamable HTTP."""

    type: Literal["http"]


type McpServer = Annotated[
    StdioMcpServer | SseMcpServer | HttpMcpServer,
    Field(discriminator="type"),
]
