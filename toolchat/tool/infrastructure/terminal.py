"""RunTerminalCommandTool — runs a local process and returns its output."""

import asyncio

from toolchat.config.domain.terminal_tool import TerminalToolConfig
from toolchat.conversation.domain.content import (
    ContentBlock,
    ToolInvocationBlock,
    ToolResultBlock,
    error_result,
)
from toolchat.tool.domain.definition import ToolDefinition, ToolSchema

TOOL_NAME = "run_terminal_command"

_DEFINITION = ToolDefinition(
    name=TOOL_NAME,
    description="Use this tool to run commands on the user's laptop.",
    input_schema=ToolSchema(
        properties={
            "cmd": {"type": "string"},
            "args": {"type": "array", "items": {"type": "string"}},
        },
        required=frozenset({"cmd", "args"}),
    ),
)


class RunTerminalCommandTool:
    """Executes `cmd` with `args` (no shell) and captures standard output.

    The result is flagged is_error when the exit status is non-zero or the
    process cannot be started. No timeout is enforced: the call suspends
    until the process exits.
    """

    def __init__(self, config: TerminalToolConfig) -> None:
        self._config = config

    @property
    def definition(self) -> ToolDefinition:
        return _DEFINITION

    async def execute(self, invocation: ToolInvocationBlock) -> list[ContentBlock]:
        cmd = invocation.input.get("cmd")
        args = invocation.input.get("args", [])
        if not isinstance(cmd, str) or not cmd:
            return [
                error_result(invocation.id, "Invalid input: 'cmd' must be a string")
            ]
        if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
            return [
                error_result(
                    invocation.id, "Invalid input: 'args' must be a list of strings"
                )
            ]

        stderr = (
            asyncio.subprocess.STDOUT
            if self._config.stderr == "merge"
            else asyncio.subprocess.DEVNULL
        )
        try:
            proc = await asyncio.create_subprocess_exec(
                cmd,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=stderr,
            )
        except (OSError, ValueError) as exc:
            # ValueError: an argument holds a NUL byte.
            reason = getattr(exc, "strerror", None) or str(exc)
            return [error_result(invocation.id, f"Failed to run {cmd}: {reason}")]

        stdout, _ = await proc.communicate()
        return [
            ToolResultBlock(
                tool_use_id=invocation.id,
                content=stdout.decode("utf-8", errors="replace"),
                is_error=proc.returncode != 0,
            )
        ]
