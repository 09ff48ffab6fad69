"""LanguageModelService Protocol — the opaque request/response model call."""

from typing import Protocol

from toolchat.llm.domain.request import CompletionRequest, CompletionResponse


class LanguageModelService(Protocol):
    """Structural interface satisfied by any model backend.

    `complete` suspends until the full response is available. Failures raise
    and are not retried.
    """

    async def complete(self, request: CompletionRequest) -> CompletionResponse: ...
