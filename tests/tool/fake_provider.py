"""FakeToolProvider — in-memory ToolProvider implementation for use in tests."""

from dataclasses import dataclass

from toolchat.tool.domain.definition import ToolDefinition
from toolchat.tool.domain.provider import ToolCallOutcome


@dataclass(frozen=True)
class ToolCallRecord:
    name: str
    arguments: dict[str, object]


class FakeToolProvider:
    """Satisfies the ToolProvider protocol.

    Returns the given definitions from list_tools. call_tool pops the next
    item of side_effects: an Exception is raised, a ToolCallOutcome returned.
    Once exhausted, `outcome` is returned for every call.
    """

    def __init__(
        self,
        name: str = "fake",
        definitions: list[ToolDefinition] | None = None,
        outcome: ToolCallOutcome | None = None,
        side_effects: list[ToolCallOutcome | Exception] | None = None,
    ) -> None:
        self._name = name
        self._definitions = definitions if definitions is not None else []
        self._outcome = outcome if outcome is not None else ToolCallOutcome(content=())
        self._side_effects: list[ToolCallOutcome | Exception] = (
            list(side_effects) if side_effects is not None else []
        )
        self.calls: list[ToolCallRecord] = []
        self.list_tools_calls = 0

    @property
    def name(self) -> str:
        return self._name

    async def list_tools(self) -> list[ToolDefinition]:
        self.list_tools_calls += 1
        return list(self._definitions)

    async def call_tool(
        self, name: str, arguments: dict[str, object]
    ) -> ToolCallOutcome:
        self.calls.append(ToolCallRecord(name=name, arguments=arguments))
        if self._side_effects:
            effect = self._side_effects.pop(0)
            if isinstance(effect, Exception):
                raise effect
            return effect
        return self._outcome
