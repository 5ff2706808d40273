"""
CLI Commands.

Organized by domain/feature area. Functions are registered as top-level
commands on the root app in advisor.cli.app.
"""

from advisor.cli.commands.apps import apps
from advisor.cli.commands.health import health
from advisor.cli.commands.people import create, delete, show, update

__all__ = [
    "apps",
    "create",
    "delete",
    "health",
    "show",
    "update",
]
