"""CLI entrypoint for toolchat — typer app that starts an interactive conversation."""

import asyncio
import logging
import sys
from contextlib import AsyncExitStack
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.text import Text

from toolchat.agent.application.orchestrator import Orchestrator
from toolchat.agent.infrastructure.observer import StructlogAgentObserver
from toolchat.config.domain.config import AppConfig
from toolchat.config.infrastructure.observer import StructlogConfigObserver
from toolchat.config.infrastructure.system_prompt import load_system_prompt
from toolchat.config.infrastructure.yaml_loader import YamlConfigLoader
from toolchat.core.errors import ToolchatError
from toolchat.input.domain.errors import InputExhaustedError
from toolchat.input.domain.source import InputSource
from toolchat.input.infrastructure.file import FileInputSource
from toolchat.input.infrastructure.stdin import StdinInputSource
from toolchat.llm.infrastructure.litellm import LiteLLMService
from toolchat.llm.infrastructure.observer import StructlogLanguageModelObserver
from toolchat.presentation.infrastructure.console import ConsolePresenter
from toolchat.tool.application.builder import build_tool_registry
from toolchat.tool.domain.provider import ToolProvider
from toolchat.tool.domain.registry import ToolRegistry
from toolchat.tool.infrastructure.mcp_provider import open_mcp_provider
from toolchat.tool.infrastructure.observer import (
    StructlogToolObserver,
    StructlogToolProviderObserver,
)

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level.

    Logs go to stderr so the conversation transcript on stdout stays readable.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        typer.echo(f"Invalid log level: {log_level!r}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> AppConfig:
    if config_path is None:
        return AppConfig()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def apply_overrides(
    config: AppConfig,
    model: str | None = None,
    max_output_tokens: int | None = None,
    system: Path | None = None,
    hide_tool_results: bool = False,
) -> AppConfig:
    """Return a copy of config with command-line values taking precedence."""
    model_updates: dict[str, object] = {}
    if model is not None:
        model_updates["name"] = model
    if max_output_tokens is not None:
        model_updates["max_output_tokens"] = max_output_tokens

    updates: dict[str, object] = {}
    if model_updates:
        updates["model"] = config.model.model_copy(update=model_updates)
    if system is not None:
        updates["system_prompt_path"] = system
    if hide_tool_results:
        updates["display"] = config.display.model_copy(
            update={"hide_tool_results": True}
        )
    return config.model_copy(update=updates)


def _print_known_tools(console: Console, registry: ToolRegistry) -> None:
    console.print("[bold]Known tools:[/bold]")
    for tool in registry:
        definition = tool.definition
        summary = definition.description.strip().splitlines()
        console.print(
            Text.assemble(
                "  ", (definition.name, "cyan"), " ", summary[0] if summary else ""
            )
        )


async def _serve(
    config: AppConfig, prompt_path: Path | None, console: Console
) -> None:
    """Open tool providers, build the registry and run the conversation loop."""
    system_prompt = load_system_prompt(config.system_prompt_path)
    stdin_source = StdinInputSource(console=console)
    input_source: InputSource = (
        FileInputSource(path=prompt_path, fallback=stdin_source, console=console)
        if prompt_path is not None
        else stdin_source
    )

    try:
        async with AsyncExitStack() as stack:
            provider_observer = StructlogToolProviderObserver()
            providers: list[ToolProvider] = []
            for name, server in config.mcp_servers.items():
                provider = await stack.enter_async_context(
                    open_mcp_provider(
                        name=name, config=server, observer=provider_observer
                    )
                )
                providers.append(provider)

            registry = await build_tool_registry(
                terminal_tool=config.terminal_tool,
                providers=providers,
                observer=StructlogToolObserver(),
            )
            _print_known_tools(console=console, registry=registry)
            if system_prompt:
                console.print(system_prompt, style="dim", markup=False)

            orchestrator = Orchestrator(
                input_source=input_source,
                service=LiteLLMService(
                    config=config.model, observer=StructlogLanguageModelObserver()
                ),
                registry=registry,
                presenter=ConsolePresenter(
                    console=console,
                    suppress_tool_results=config.display.hide_tool_results,
                ),
                observer=StructlogAgentObserver(),
                max_output_tokens=config.model.max_output_tokens,
                system_prompt=system_prompt,
            )
            await orchestrator.run()
    except* ToolchatError as eg:
        # MCP transports run inside task groups, which wrap errors in groups.
        raise _first_error(eg)


def _first_error(group: BaseExceptionGroup) -> BaseException:
    first = group.exceptions[0]
    if isinstance(first, BaseExceptionGroup):
        return _first_error(first)
    return first


@app.command()
def run(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a toolchat config YAML"
    ),
    prompt: Path | None = typer.Option(
        None, "--prompt", help="Read the first user message from this file"
    ),
    system: Path | None = typer.Option(
        None, "--system", help="Load the system prompt from this file"
    ),
    hide_tool_results: bool = typer.Option(
        False, "--hide-tool-results", help="Do not print tool results"
    ),
    model: str | None = typer.Option(
        None, "--model", "-m", help="LiteLLM model name, e.g. anthropic/claude-..."
    ),
    max_output_tokens: int | None = typer.Option(
        None, "--max-output-tokens", min=1, help="Maximum tokens per model reply"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
    log_level: str = typer.Option(
        "warning", "--log-level", help="Minimum log level written to stderr"
    ),
) -> None:
    """Chat with a language model that can run local and MCP tools."""
    try:
        _configure_structlog(log_format=log_format, log_level=log_level)
        config = apply_overrides(
            config=_load_config(config_path=config_path),
            model=model,
            max_output_tokens=max_output_tokens,
            system=system,
            hide_tool_results=hide_tool_results,
        )
        asyncio.run(_serve(config=config, prompt_path=prompt, console=Console()))

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("\nConversation interrupted.")
        sys.exit(1)
    except InputExhaustedError:
        typer.echo("")
        sys.exit(0)
    except ToolchatError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
