"""ConsolePresenter — renders conversation blocks with Rich."""

import json

from rich.console import Console
from rich.text import Text

from toolchat.conversation.domain.content import (
    ImageBlock,
    TextBlock,
    ToolInvocationBlock,
    ToolResultBlock,
)


class ConsolePresenter:
    """Writes assistant text and tool traffic to a Rich console.

    suppress_tool_results is fixed at construction; suppressed results are
    still part of the conversation, they are just not printed.
    """

    def __init__(self, console: Console, suppress_tool_results: bool = False) -> None:
        self._console = console
        self._suppress_tool_results = suppress_tool_results

    @property
    def suppress_tool_results(self) -> bool:
        return self._suppress_tool_results

    def show_text(self, block: TextBlock) -> None:
        self._console.print(
            Text.assemble(("Assistant", "bold green"), ": ", block.text)
        )

    def show_tool_invocation(self, block: ToolInvocationBlock) -> None:
        arguments = json.dumps(block.input, indent=2, ensure_ascii=False)
        self._console.print(
            Text.assemble(
                ("Tool", "bold yellow"), f": [{block.id}] {block.name} {arguments}"
            )
        )

    def show_tool_result(self, block: ToolResultBlock) -> None:
        if self._suppress_tool_results:
            return

        label = (
            ("Tool error", "bold red") if block.is_error else ("Tool", "bold yellow")
        )
        if isinstance(block.content, str):
            self._console.print(
                Text.assemble(label, f": [{block.tool_use_id}] {block.content}")
            )
            return

        self._console.print(Text.assemble(label, f": [{block.tool_use_id}]"))
        for item in block.content:
            if isinstance(item, TextBlock):
                self._console.print(Text(item.text))
            elif isinstance(item, ImageBlock):
                self._console.print(Text(f"[image: {item.mime_type}]", style="dim"))
