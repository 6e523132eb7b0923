"""
reckon CLI - Entry point.

Commands:
- eval: evaluate one expression and print the result
- repl: read-evaluate-print loop, one fresh pipeline per line
"""

from __future__ import annotations

import logging
import platform
import sys
import tomllib
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from reckon._version import get_version
from reckon.config import ReckonConfig, load_config
from reckon.core.errors import ErrorContext
from reckon.core.ir.expressions import depth, node_count
from reckon.core.pipeline import CalcResult, calculate

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

_QUIT_WORDS = {"quit", "exit"}

app = typer.Typer(
    help="reckon - evaluate arithmetic expressions (+ - * / and parentheses)",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"reckon {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def format_value(value: float, precision: int | None = None) -> str:
    """Render a result for display.

    Without a precision the shortest round-tripping form is used, with a
    trailing ``.0`` dropped (``11.0`` -> ``11``).
    """
    if precision is not None:
        return f"{value:.{precision}f}"
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _print_result(result: CalcResult, config: ReckonConfig) -> None:
    """Print a value to stdout, or an error with its caret context to stderr."""
    if result.ok:
        assert result.value is not None
        console.print(format_value(result.value, config.precision))
        return

    assert result.error is not None
    err_console.print(f"[red]{escape(str(result.error))}[/red]")
    if result.error.pos is not None:
        context = ErrorContext(source=result.source, pos=result.error.pos)
        err_console.print(escape(context.format()), highlight=False, soft_wrap=True)


def _get_config(ctx: typer.Context) -> ReckonConfig:
    config = ctx.obj
    if config is None:
        config = load_config()
    return config


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a reckon.toml file (default: ./reckon.toml)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    ),
) -> None:
    """reckon CLI main callback for global options."""
    if config_path is not None and not config_path.exists():
        typer.echo(f"Config file not found: {config_path}", err=True)
        raise typer.Exit(2)

    try:
        config = load_config(config_path)
        if log_level is not None:
            config = config.model_copy(
                update={"log_level": ReckonConfig(log_level=log_level).log_level}
            )
    except (ValidationError, tomllib.TOMLDecodeError) as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(2)

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    ctx.obj = config


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help='Expression to evaluate, e.g. "(3 + 4) * 2"'),
    show_tokens: bool = typer.Option(False, "--tokens", help="Print the tokens the parser read"),
    show_ast: bool = typer.Option(False, "--ast", help="Print the parsed tree"),
    allow_trailing: bool = typer.Option(
        False,
        "--allow-trailing",
        help="Ignore tokens after the first complete expression",
    ),
) -> None:
    """Evaluate one expression and print the result."""
    config = _get_config(ctx)
    allow_trailing = allow_trailing or config.allow_trailing

    result = calculate(expression, allow_trailing=allow_trailing)

    if result.ok and show_tokens:
        for tok in result.tokens:
            console.print(escape(repr(tok)), highlight=False)
    if result.expr is not None and show_ast:
        console.print(escape(str(result.expr)), highlight=False, soft_wrap=True)
        console.print(f"nodes: {node_count(result.expr)}, depth: {depth(result.expr)}")

    _print_result(result, config)
    if not result.ok:
        raise typer.Exit(1)


@app.command(name="repl")
def repl_command(
    ctx: typer.Context,
    prompt: str | None = typer.Option(None, "--prompt", "-p", help="Prompt text"),
) -> None:
    """Read expressions line by line and print each result.

    Errors are reported and the loop continues. Enter quit, exit, or EOF
    to leave.
    """
    config = _get_config(ctx)
    if prompt is None:
        prompt = config.prompt

    count = 0
    while True:
        try:
            line = console.input(escape(prompt))
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        line = line.strip()
        if not line:
            continue
        if line.lower() in _QUIT_WORDS:
            break

        count += 1
        _print_result(calculate(line, allow_trailing=config.allow_trailing), config)

    logger.info("repl finished after %d expressions", count)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
