"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import CONSOLE_HANDLER_NAME, LOGGER_NAME
from .core.coalesce import RefreshPlan, plan_refresh
from .core.replay import replay_verified
from .errors import (
    ListDeltaError,
    OperationLogError,
    ProgrammingError,
    ReplayError,
)
from .io.oplog import load_oplog, operation_to_dict
from .utils.console_logger import ensure_console_logger

app = typer.Typer(help="Coalesce batched list edits into list-widget change sets")
console = Console()


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (OperationLogError, ProgrammingError, ReplayError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except ListDeltaError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _describe(plan: RefreshPlan) -> str:
    if plan.is_reset:
        return "[yellow]reload all rows"
    if plan.is_empty:
        return "[dim]no change"
    return escape(", ".join(repr(change_set) for change_set in plan.change_sets))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    ensure_console_logger(logging.getLogger(LOGGER_NAME), CONSOLE_HANDLER_NAME, level=level)


@app.command()
@_handle_errors
def coalesce(oplog: Path = typer.Argument(..., exists=True, dir_okay=False)) -> None:
    """Print the change sets a list widget receives for each operation."""

    log = load_oplog(oplog)
    for position, operation in enumerate(log.operations):
        kind = operation_to_dict(operation)["op"]
        console.print(f"{position} {kind}: {_describe(plan_refresh(operation))}", soft_wrap=True)


@app.command()
@_handle_errors
def check(oplog: Path = typer.Argument(..., exists=True, dir_okay=False)) -> None:
    """Replay the log and verify every reduction against sequential application."""

    log = load_oplog(oplog)
    items = list(log.initial)
    for position, operation in enumerate(log.operations):
        try:
            items, _ = replay_verified(items, operation)
        except ReplayError as exc:
            raise type(exc)(f"operation {position}: {exc}") from exc
    console.print(f"[green]Verified {len(log.operations)} operations; final length {len(items)}")


if __name__ == "__main__":  # pragma: no cover
    app()
