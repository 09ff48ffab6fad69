"""Built-in terminal tool configuration model."""

from typing import Literal

from pydantic import BaseModel

type StderrPolicy = Literal["merge", "ignore"]


class TerminalToolConfig(BaseModel, frozen=True):
    """Settings of the `run_terminal_command` tool.

    stderr="merge" folds standard error into the captured output;
    stderr="ignore" discards it.
    """

    enabled: bool = True
    stderr: StderrPolicy = "merge"
