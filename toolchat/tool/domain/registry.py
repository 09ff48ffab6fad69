"""ToolRegistry — resolves tool invocations by name and dispatches them."""

import time
from collections.abc import Iterable, Iterator

from toolchat.conversation.domain.content import (
    ContentBlock,
    ToolInvocationBlock,
    ToolResultBlock,
    error_result,
)
from toolchat.tool.domain.definition import ToolDefinition
from toolchat.tool.domain.errors import DuplicateToolError
from toolchat.tool.domain.observer import ToolObserver
from toolchat.tool.domain.tool import Tool


class ToolRegistry:
    """Fixed name -> Tool mapping, built once and read-only afterwards.

    Tools are registered only through the constructor; there is no runtime
    registration or removal.
    """

    def __init__(self, tools: Iterable[Tool], observer: ToolObserver) -> None:
        self._observer = observer
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            self._register(tool)

    def _register(self, tool: Tool) -> None:
        name = tool.definition.name
        if name in self._tools:
            raise DuplicateToolError(tool_name=name)
        self._tools[name] = tool
        self._observer.tool_registered(tool_name=name)

    def find(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def export_definitions(self) -> list[ToolDefinition]:
        """Return every tool definition in registration order."""
        return [tool.definition for tool in self._tools.values()]

    async def dispatch(self, invocation: ToolInvocationBlock) -> list[ContentBlock]:
        """Execute one invocation and return the blocks it produced.

        An unknown tool name or a tool that raises yields an is_error
        ToolResultBlock; neither ever propagates. Results correlated to another
        id are dropped, and the returned blocks always contain a ToolResultBlock
        for invocation.id.
        """
        tool = self.find(invocation.name)
        if tool is None:
            self._observer.tool_not_found(
                tool_use_id=invocation.id, tool_name=invocation.name
            )
            return [
                error_result(
                    tool_use_id=invocation.id,
                    message=f"Unsupported tool: {invocation.name}",
                )
            ]

        self._observer.tool_dispatched(
            tool_use_id=invocation.id, tool_name=invocation.name
        )
        start = time.monotonic()
        try:
            produced = await tool.execute(invocation)
        except Exception as exc:  # noqa: BLE001
            self._observer.tool_failed(
                tool_use_id=invocation.id, tool_name=invocation.name, reason=str(exc)
            )
            produced = [
                error_result(
                    tool_use_id=invocation.id,
                    message=f"Tool {invocation.name} failed: {exc}",
                )
            ]
        duration_ms = int((time.monotonic() - start) * 1000)

        blocks: list[ContentBlock] = []
        for block in produced:
            if (
                isinstance(block, ToolResultBlock)
                and block.tool_use_id != invocation.id
            ):
                self._observer.tool_result_discarded(
                    tool_use_id=invocation.id,
                    tool_name=invocation.name,
                    stray_id=block.tool_use_id,
                )
                continue
            blocks.append(block)

        results = [block for block in blocks if isinstance(block, ToolResultBlock)]
        if not results:
            self._observer.tool_result_missing(
                tool_use_id=invocation.id, tool_name=invocation.name
            )
            blocks.append(
                error_result(
                    tool_use_id=invocation.id,
                    message=f"Tool {invocation.name} returned no result",
                )
            )

        self._observer.tool_completed(
            tool_use_id=invocation.id,
            tool_name=invocation.name,
            is_error=any(result.is_error for result in results) or not results,
            duration_ms=duration_ms,
        )
        return blocks

    def __iter__(self) -> Iterator[Tool]:
        return iter(list(self._tools.values()))

    def __len__(self) -> int:
        return len(self._tools)
