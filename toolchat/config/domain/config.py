"""Top-level AppConfig aggregate — the root configuration object."""

from pathlib import Path

from pydantic import BaseModel, Field

from toolchat.config.domain.display import DisplayConfig
from toolchat.config.domain.mcp_server import McpServer
from toolchat.config.domain.model import ModelConfig
from toolchat.config.domain.terminal_tool import TerminalToolConfig

type ServerName = str


class AppConfig(BaseModel, frozen=True):
    """Root configuration aggregate. Every field has a default."""

    model: ModelConfig = Field(default_factory=ModelConfig)
    system_prompt_path: Path | None = None
    terminal_tool: TerminalToolConfig = Field(default_factory=TerminalToolConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    mcp_servers: dict[ServerName, McpServer] = Field(default_factory=dict)
