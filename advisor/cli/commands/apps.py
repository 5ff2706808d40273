"""
App Commands.

Inspect the configured apps. No network calls.
"""

import typer
from rich.markup import escape
from rich.table import Table

from advisor.cli.commands.base import CliState, console, load_registry_or_exit


def apps(ctx: typer.Context) -> None:
    """
    List the apps from the settings file.

    Examples:
        advisor apps
    """
    state = ctx.ensure_object(CliState)
    registry = load_registry_or_exit(state)

    table = Table(title="Apps", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Location")
    table.add_column("Token")
    table.add_column("Default")

    for instance in registry.instances:
        table.add_row(
            escape(instance.name),
            escape(instance.location),
            "set" if instance.auth_token else "-",
            "✓" if instance.name == registry.default_name else "",
        )

    console.print(table)
    console.print(f"[dim]Selection: {registry.selection.value}[/dim]")
