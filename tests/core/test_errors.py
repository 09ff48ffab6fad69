"""Tests verifying the ToolchatError type hierarchy."""

from pathlib import Path

import pytest

from toolchat.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from toolchat.conversation.domain.errors import EmptyToolResultsError
from toolchat.core.errors import ToolchatError
from toolchat.input.domain.errors import InputExhaustedError
from toolchat.input.infrastructure.errors import PromptFileError
from toolchat.llm.infrastructure.errors import LanguageModelError
from toolchat.tool.domain.errors import DuplicateToolError, ToolProviderError

_ALL_ERRORS: list[ToolchatError] = [
    MissingEnvVarsError(missing_vars=["MY_VAR"]),
    ConfigValidationError(reason="bad value"),
    ConfigLoadError(path=Path("/some/config.yaml")),
    EmptyToolResultsError(),
    InputExhaustedError(),
    PromptFileError(path=Path("/some/prompt.txt"), reason="no such file"),
    LanguageModelError(reason="rate limited"),
    DuplicateToolError(tool_name="run_terminal_command"),
    ToolProviderError(server="files", reason="connection refused"),
]


class TestToolchatErrorHierarchy:
    """All toolchat-specific exceptions inherit from ToolchatError."""

    @pytest.mark.parametrize("error", _ALL_ERRORS, ids=lambda e: type(e).__name__)
    def test_is_toolchat_error(self, error: ToolchatError) -> None:
        assert isinstance(error, ToolchatError)

    @pytest.mark.parametrize("error", _ALL_ERRORS, ids=lambda e: type(e).__name__)
    def test_message_starts_with_failed(self, error: ToolchatError) -> None:
        assert str(error).startswith("Failed to ")

    def test_toolchat_error_is_exception(self) -> None:
        assert isinstance(ToolchatError("test"), Exception)


class TestRetriableFlag:
    """retriable defaults to False and can be set explicitly."""

    def test_defaults_to_not_retriable(self) -> None:
        assert ToolchatError("test").retriable is False

    def test_retriable_can_be_set(self) -> None:
        assert ToolchatError("test", retriable=True).retriable is True


class TestErrorMessages:
    def test_missing_env_vars_are_sorted(self) -> None:
        error = MissingEnvVarsError(missing_vars=["ZED", "ALPHA"])
        assert "ALPHA, ZED" in str(error)

    def test_duplicate_tool_names_the_tool(self) -> None:
        error = DuplicateToolError(tool_name="ls")
        assert "'ls'" in str(error)
        assert error.tool_name == "ls"

    def test_tool_provider_error_names_server_and_reason(self) -> None:
        error = ToolProviderError(server="files", reason="connection refused")
        assert "'files'" in str(error)
        assert "connection refused" in str(error)
        assert error.server == "files"

    def test_language_model_error_includes_reason(self) -> None:
        assert "rate limited" in str(LanguageModelError(reason="rate limited"))

    def test_prompt_file_error_includes_path(self) -> None:
        error = PromptFileError(path=Path("/tmp/p.txt"), reason="denied")
        assert "/tmp/p.txt" in str(error)
        assert error.path == Path("/tmp/p.txt")
