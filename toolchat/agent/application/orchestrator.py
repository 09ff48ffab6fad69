"""Orchestrator — the conversation loop tying input, model and tools together."""

from typing import NoReturn

from toolchat.agent.domain.observer import AgentObserver
from toolchat.agent.domain.state import LoopState
from toolchat.conversation.domain.content import (
    ContentBlock,
    TextBlock,
    ToolInvocationBlock,
    ToolResultBlock,
)
from toolchat.conversation.domain.log import ConversationLog
from toolchat.conversation.domain.turn import Turn
from toolchat.input.domain.errors import InputExhaustedError
from toolchat.input.domain.source import InputSource
from toolchat.llm.domain.request import CompletionRequest
from toolchat.llm.domain.service import LanguageModelService
from toolchat.presentation.domain.presenter import Presenter
from toolchat.tool.domain.registry import ToolRegistry


class Orchestrator:
    """Drives the dialogue: one step is one model round trip.

    The orchestrator is the only writer of its ConversationLog and runs one
    activity at a time: reading input, calling the model, or executing a tool.
    Blocks are displayed and invocations executed strictly in response order.
    """

    def __init__(
        self,
        input_source: InputSource,
        service: LanguageModelService,
        registry: ToolRegistry,
        presenter: Presenter,
        observer: AgentObserver,
        max_output_tokens: int,
        system_prompt: str | None = None,
    ) -> None:
        self._input_source = input_source
        self._service = service
        self._registry = registry
        self._presenter = presenter
        self._observer = observer
        self._max_output_tokens = max_output_tokens
        self._system_prompt = system_prompt
        self._conversation = ConversationLog()
        self._state = LoopState.AWAITING_INPUT

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def conversation(self) -> tuple[Turn, ...]:
        return self._conversation.to_history()

    async def run(self) -> NoReturn:
        """Loop forever. Only an error ends the loop.

        Raises:
            InputExhaustedError: when the input source runs dry.
            LanguageModelError: when the model call fails.
        """
        while True:
            await self.step()

    async def step(self) -> LoopState:
        """Run one iteration and return the state for the next one."""
        if self._state is LoopState.AWAITING_INPUT:
            await self._acquire_input()

        response = await self._service.complete(
            CompletionRequest(
                history=self._conversation.to_history(),
                tools=tuple(self._registry.export_definitions()),
                system_prompt=self._system_prompt,
                max_output_tokens=self._max_output_tokens,
            )
        )
        self._conversation.append_assistant(response.blocks)
        self._observer.response_received(
            turn_count=len(self._conversation),
            block_count=len(response.blocks),
            invocation_count=len(response.invocations()),
        )

        results: list[ContentBlock] = []
        invoked = False
        for block in response.blocks:
            self._present(block)
            if isinstance(block, ToolInvocationBlock):
                invoked = True
                produced = await self._registry.dispatch(block)
                for result in produced:
                    self._present(result)
                results.extend(produced)

        if invoked:
            self._conversation.append_tool_results(results)
            self._observer.tool_results_appended(
                turn_count=len(self._conversation), block_count=len(results)
            )
            self._state = LoopState.CONTINUING
        else:
            self._state = LoopState.AWAITING_INPUT
        return self._state

    async def _acquire_input(self) -> None:
        self._observer.input_awaited(turn_count=len(self._conversation))
        try:
            text = await self._input_source.read_line()
        except InputExhaustedError:
            self._observer.input_exhausted(turn_count=len(self._conversation))
            raise
        self._conversation.append_user_text(text)
        self._observer.input_received(
            turn_count=len(self._conversation), length=len(text)
        )

    def _present(self, block: ContentBlock) -> None:
        """Forward a block to the presenter; display failures never stop the loop."""
        try:
            if isinstance(block, TextBlock):
                self._presenter.show_text(block)
            elif isinstance(block, ToolInvocationBlock):
                self._presenter.show_tool_invocation(block)
            elif isinstance(block, ToolResultBlock):
                self._presenter.show_tool_result(block)
        except Exception as exc:  # noqa: BLE001
            self._observer.presentation_failed(block_type=block.type, reason=str(exc))
