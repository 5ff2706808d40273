"""
Advisor CLI application.

Usage:
    advisor --help
    advisor apps                                          # List configured apps
    advisor -a staging health                             # Healthcheck (no token)
    advisor -a staging show people                        # Table of people
    advisor -a staging show questionnaires
    advisor -a staging delete someone@example.com
    advisor -a staging update 123a add someone@example.com
    advisor -a staging create person --name Steve --email steve@example.com

Options:
    --app, -a         Which app to act upon (optional with a default)
    --config, -c      Settings file (default: .advisor found from cwd upwards)
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
"""

from pathlib import Path
from typing import Optional

import typer

from advisor import __version__
from advisor.cli.commands import apps, create, delete, health, show, update
from advisor.cli.commands.base import CliState, console, err_console, exit_fatal
from advisor.cli.commands.people import CREATE_CONTEXT_SETTINGS
from advisor.core.exceptions import AdvisorError
from advisor.core.logging import setup_logging

app = typer.Typer(
    name="advisor",
    help="Advisor CLI - Managing instances of advisor.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command()(apps)
app.command()(health)
app.command()(show)
app.command()(delete)
app.command()(update)
app.command(context_settings=CREATE_CONTEXT_SETTINGS)(create)


def _version_callback(value: bool) -> None:
    if value:
        console.print(__version__)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    app_name: Optional[str] = typer.Option(
        None,
        "--app",
        "-a",
        metavar="APP",
        help="Which app to act upon",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        help="Settings file (default: .advisor, searched from the working directory upwards)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """
    Advisor CLI - Managing instances of advisor.

    Check health, list people, and manage people and questionnaires on
    configured advisor apps.
    """
    level = "DEBUG" if debug else "INFO" if verbose else None
    try:
        setup_logging(level=level)
    except AdvisorError as e:
        setup_logging(level=level or "WARNING", format_type="console")
        exit_fatal(e)

    if debug:
        err_console.print("[dim]Debug mode enabled[/dim]")

    ctx.obj = CliState(app_name=app_name, config_path=config)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
