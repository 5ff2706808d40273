"""
Shared command plumbing.

Parse, resolve, dispatch, print. Every remote command goes through
run_command so the Success:/Failure: contract lives in one place.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from advisor.cli.dispatcher import dispatch
from advisor.core.config import load_registry
from advisor.core.exceptions import AdvisorError
from advisor.core.logging import get_logger
from advisor.domain.commands import EMAIL_ERROR, has_at, parse_command
from advisor.domain.registry import Instance, Registry

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)


@dataclass(frozen=True)
class CliState:
    """Global options, carried on the Typer context."""

    app_name: str | None = None
    config_path: Path | None = None


def validate_email(value: str) -> str:
    """Typer callback rejecting values without an @."""
    if not has_at(value):
        raise typer.BadParameter(EMAIL_ERROR)
    return value


def exit_fatal(error: AdvisorError) -> NoReturn:
    """Report a pre-dispatch error on stderr and terminate."""
    logger.info("Fatal error", code=error.code)
    err_console.print(f"[red]Error:[/red] {escape(error.message)}", soft_wrap=True)
    raise typer.Exit(error.exit_code)


def load_registry_or_exit(state: CliState) -> Registry:
    try:
        return load_registry(state.config_path)
    except AdvisorError as e:
        exit_fatal(e)


def resolve_instance_or_exit(state: CliState) -> Instance:
    registry = load_registry_or_exit(state)
    try:
        instance = registry.resolve(state.app_name)
    except AdvisorError as e:
        exit_fatal(e)
    logger.debug("App resolved", app=instance.name, location=instance.location)
    return instance


def run_command(ctx: typer.Context, subcommand: str, args: Sequence[str] = ()) -> None:
    """
    Parse the tokens, resolve the app, dispatch, and print the outcome.

    Exits 1 after printing a Failure: line; exits 2 on fatal config or
    app resolution errors.
    """
    state = ctx.ensure_object(CliState)

    try:
        command = parse_command(subcommand, args)
    except AdvisorError as e:
        exit_fatal(e)
    logger.debug("Command parsed", command=repr(command))

    instance = resolve_instance_or_exit(state)

    try:
        result = asyncio.run(dispatch(instance, command))
    except AdvisorError as e:
        logger.info("Command failed", command=command.name, code=e.code)
        console.print(f"Failure: {e.message}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(e.exit_code)

    if isinstance(result, str):
        console.print(f"Success: {result}", markup=False, highlight=False, soft_wrap=True)
    else:
        console.print("Success:", highlight=False)
        console.print(result)
