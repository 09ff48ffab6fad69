"""LiteLLMService — language-model service implementation using LiteLLM.

The conversation is kept as content blocks; this adapter translates it to the
OpenAI-compatible chat format LiteLLM accepts for every provider, and
translates the reply back.
"""

import json
import time
from typing import Any

import litellm

from toolchat.config.domain.model import ModelConfig
from toolchat.conversation.domain.content import (
    ContentBlock,
    ImageBlock,
    TextBlock,
    ToolInvocationBlock,
    ToolResultBlock,
)
from toolchat.conversation.domain.turn import Turn
from toolchat.llm.domain.observer import LanguageModelObserver
from toolchat.llm.domain.request import CompletionRequest, CompletionResponse
from toolchat.llm.infrastructure.errors import LanguageModelError
from toolchat.tool.domain.definition import ToolDefinition

type Message = dict[str, Any]


class LiteLLMService:
    """Sends the full history with every request; nothing is cached between calls."""

    def __init__(self, config: ModelConfig, observer: LanguageModelObserver) -> None:
        self._config = config
        self._observer = observer

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        """Run one non-streaming completion.

        Raises:
            LanguageModelError: if the call fails or a tool call carries
                arguments that are not a JSON object.
        """
        self._observer.completion_started(
            model=self._config.name,
            turn_count=len(request.history),
            tool_count=len(request.tools),
        )

        kwargs: dict[str, Any] = {
            "model": self._config.name,
            "max_tokens": request.max_output_tokens,
            "messages": encode_messages(
                history=request.history, system_prompt=request.system_prompt
            ),
        }
        if request.tools:
            kwargs["tools"] = [encode_tool(tool) for tool in request.tools]
        if self._config.temperature is not None:
            kwargs["temperature"] = self._config.temperature

        start = time.monotonic()
        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as exc:
            reason = str(exc)
            self._observer.completion_failed(model=self._config.name, reason=reason)
            raise LanguageModelError(reason=reason) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        try:
            blocks = decode_message(response.choices[0].message)
        except LanguageModelError as exc:
            reason = str(exc).removeprefix("Failed to call language model: ")
            self._observer.completion_failed(model=self._config.name, reason=reason)
            raise

        self._observer.completion_completed(
            model=self._config.name,
            duration_ms=duration_ms,
            block_count=len(blocks),
        )
        return CompletionResponse(blocks=tuple(blocks))


def encode_tool(tool: ToolDefinition) -> Message:
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.input_schema.to_json_schema(),
        },
    }


def encode_messages(
    history: tuple[Turn, ...], system_prompt: str | None
) -> list[Message]:
    messages: list[Message] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    for turn in history:
        if turn.speaker == "assistant":
            messages.append(_encode_assistant_turn(turn))
        else:
            messages.extend(_encode_user_turn(turn))
    return messages


def _encode_assistant_turn(turn: Turn) -> Message:
    text = "".join(b.text for b in turn.blocks if isinstance(b, TextBlock))
    tool_calls = [
        {
            "id": block.id,
            "type": "function",
            "function": {"name": block.name, "arguments": json.dumps(block.input)},
        }
        for block in turn.invocations()
    ]
    message: Message = {"role": "assistant", "content": text}
    if tool_calls:
        message["content"] = text or None
        message["tool_calls"] = tool_calls
    return message


def _encode_user_turn(turn: Turn) -> list[Message]:
    """Tool results become `tool` messages; text and images trail as a user message."""
    tool_messages: list[Message] = []
    parts: list[Message] = []
    for block in turn.blocks:
        if isinstance(block, ToolResultBlock):
            tool_messages.append(
                {
                    "role": "tool",
                    "tool_call_id": block.tool_use_id,
                    "content": _tool_result_text(block),
                }
            )
            if not isinstance(block.content, str):
                parts.extend(
                    _image_part(item)
                    for item in block.content
                    if isinstance(item, ImageBlock)
                )
        elif isinstance(block, TextBlock):
            parts.append({"type": "text", "text": block.text})
        elif isinstance(block, ImageBlock):
            parts.append(_image_part(block))

    messages = tool_messages
    if len(parts) == 1 and parts[0]["type"] == "text":
        messages.append({"role": "user", "content": parts[0]["text"]})
    elif parts:
        messages.append({"role": "user", "content": parts})
    return messages


def _tool_result_text(block: ToolResultBlock) -> str:
    text = block.text()
    if not text and not isinstance(block.content, str) and block.content:
        text = "(image output attached)"
    if block.is_error:
        return f"Error: {text}"
    return text


def _image_part(block: ImageBlock) -> Message:
    return {
        "type": "image_url",
        "image_url": {"url": f"data:{block.mime_type};base64,{block.data}"},
    }


def decode_message(message: Any) -> list[ContentBlock]:
    """Map a chat completion message to content blocks: text first, then tool calls.

    Raises:
        LanguageModelError: if tool-call arguments are not a JSON object.
    """
    blocks: list[ContentBlock] = []
    if message.content:
        blocks.append(TextBlock(text=message.content))

    for call in message.tool_calls or []:
        raw_arguments = call.function.arguments or "{}"
        try:
            arguments = json.loads(raw_arguments)
        except json.JSONDecodeError as exc:
            raise LanguageModelError(
                reason=f"tool call {call.id} has invalid JSON arguments: {exc}"
            ) from exc
        if not isinstance(arguments, dict):
            raise LanguageModelError(
                reason=f"tool call {call.id} arguments are not a JSON object"
            )
        blocks.append(
            ToolInvocationBlock(id=call.id, name=call.function.name, input=arguments)
        )
    return blocks
