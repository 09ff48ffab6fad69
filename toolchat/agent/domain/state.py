"""LoopState — the two states of the conversation loop."""

from enum import StrEnum


class LoopState(StrEnum):
    """AWAITING_INPUT: the last response had no tool invocation, ask the user.

    CONTINUING: tool results were just appended, call the model again without
    asking for input.
    """

    AWAITING_INPUT = "awaiting_input"
    CONTINUING = "continuing"
