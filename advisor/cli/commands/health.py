"""
Health Check Commands.
"""

import typer

from advisor.cli.commands.base import run_command


def health(ctx: typer.Context) -> None:
    """
    Check that the app is up (no authentication).

    Examples:
        advisor -a staging health
    """
    run_command(ctx, "health")
