"""McpToolProvider — ToolProvider implementation over an MCP client session."""

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager
from datetime import timedelta

import anyio
from mcp import ClientSession, StdioServerParameters
from mcp.client.sse import sse_client
from mcp.client.stdio import get_default_environment, stdio_client
from mcp.client.streamable_http import streamablehttp_client
from mcp.shared.exceptions import McpError
from mcp.types import (
    CallToolResult,
    ImageContent,
    Implementation,
    TextContent,
    Tool as McpToolDescription,
)
from pydantic import BaseModel

from toolchat.config.domain.mcp_server import (
    HttpMcpServer,
    McpServer,
    SseMcpServer,
    StdioMcpServer,
)
from toolchat.conversation.domain.content import (
    ImageBlock,
    ResultContentBlock,
    TextBlock,
)
from toolchat.tool.domain.definition import ToolDefinition, ToolSchema
from toolchat.tool.domain.errors import ToolProviderError
from toolchat.tool.domain.observer import ToolProviderObserver
from toolchat.tool.domain.provider import ToolCallOutcome

_CLIENT_INFO = Implementation(name="toolchat", version="0.1.0")

# Raised by a session whose server replied with an error or whose transport died.
_SESSION_ERRORS = (
    McpError,
    anyio.ClosedResourceError,
    anyio.BrokenResourceError,
    OSError,
)


class McpToolProvider:
    """Wraps one initialized MCP ClientSession.

    Satisfies the ToolProvider protocol structurally. The session itself is
    owned by whoever opened it (see open_mcp_provider).
    """

    def __init__(
        self, name: str, session: ClientSession, observer: ToolProviderObserver
    ) -> None:
        self._name = name
        self._session = session
        self._observer = observer

    @property
    def name(self) -> str:
        return self._name

    async def list_tools(self) -> list[ToolDefinition]:
        """Return every tool the server advertises, following pagination cursors.

        Raises:
            ToolProviderError: if the server answers with an MCP error or the
                connection to it is lost.
        """
        definitions: list[ToolDefinition] = []
        cursor: str | None = None
        while True:
            try:
                if cursor is None:
                    result = await self._session.list_tools()
                else:
                    result = await self._session.list_tools(cursor=cursor)
            except _SESSION_ERRORS as exc:
                raise ToolProviderError(server=self._name, reason=_reason(exc)) from exc

            definitions.extend(_map_tool(tool) for tool in result.tools)
            cursor = result.nextCursor
            if not cursor:
                break

        self._observer.provider_tools_listed(
            server=self._name, tool_names=[d.name for d in definitions]
        )
        return definitions

    async def call_tool(
        self, name: str, arguments: dict[str, object]
    ) -> ToolCallOutcome:
        """Call a remote tool and map its reply.

        Raises:
            ToolProviderError: if the server answers with an MCP error or the
                connection to it is lost.
        """
        try:
            result: CallToolResult = await self._session.call_tool(
                name=name, arguments=arguments
            )
        except _SESSION_ERRORS as exc:
            raise ToolProviderError(server=self._name, reason=_reason(exc)) from exc

        return ToolCallOutcome(
            content=tuple(_map_content(item) for item in result.content),
            is_error=result.isError,
        )


@asynccontextmanager
async def open_mcp_provider(
    name: str, config: McpServer, observer: ToolProviderObserver
) -> AsyncIterator[McpToolProvider]:
    """Connect to an MCP server, initialize the session and yield a provider.

    The transport and session are closed when the context exits.

    Raises:
        ToolProviderError: if the server cannot be started, reached or initialized.
    """
    async with AsyncExitStack() as stack:
        try:
            read, write = await stack.enter_async_context(
                _open_streams(name=name, config=config)
            )
            session = await stack.enter_async_context(
                ClientSession(read, write, client_info=_CLIENT_INFO)
            )
            await session.initialize()
        except (OSError, McpError) as exc:
            observer.provider_connection_failed(server=name, reason=str(exc))
            raise ToolProviderError(server=name, reason=str(exc)) from exc

        observer.provider_connected(server=name)
        yield McpToolProvider(name=name, session=session, observer=observer)


@asynccontextmanager
async def _open_streams(name: str, config: McpServer) -> AsyncIterator[tuple]:
    """Open the transport described by config and yield its (read, write) streams."""
    if isinstance(config, StdioMcpServer):
        async with stdio_client(stdio_parameters(config)) as (read, write):
            yield read, write
    elif isinstance(config, SseMcpServer):
        async with sse_client(
            url=config.url,
            headers=dict(config.headers),
            timeout=config.timeout_seconds,
        ) as (read, write):
            yield read, write
    elif isinstance(config, HttpMcpServer):
        async with streamablehttp_client(
            url=config.url,
            headers=dict(config.headers),
            timeout=timedelta(seconds=config.timeout_seconds),
        ) as (read, write, _):
            yield read, write
    else:
        raise ToolProviderError(server=name, reason="unsupported MCP server type")


def stdio_parameters(config: StdioMcpServer) -> StdioServerParameters:
    """Map a stdio server config to the SDK's launch parameters.

    Without configured env vars the SDK picks its own default environment.
    """
    return StdioServerParameters(
        command=config.command,
        args=list(config.args),
        env={**get_default_environment(), **config.env} if config.env else None,
        cwd=config.cwd,
    )


def _map_tool(tool: McpToolDescription) -> ToolDefinition:
    schema = tool.inputSchema or {}
    return ToolDefinition(
        name=tool.name,
        description=tool.description or "",
        input_schema=ToolSchema(
            properties=schema.get("properties") or {},
            required=frozenset(schema.get("required") or []),
        ),
    )


def _map_content(item: BaseModel) -> ResultContentBlock:
    if isinstance(item, TextContent):
        return TextBlock(text=item.text)
    if isinstance(item, ImageContent):
        return ImageBlock(data=item.data, mime_type=item.mimeType)
    return TextBlock(text=item.model_dump_json(exclude_none=True))


def _reason(exc: BaseException) -> str:
    # anyio stream errors carry no message.
    return str(exc) or f"connection lost ({type(exc).__name__})"
