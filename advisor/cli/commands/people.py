"""
People Commands.

Listing people and questionnaires, and managing people and their
questionnaire membership. All of these require the app's token.
"""

from enum import Enum

import typer

from advisor.cli.commands.base import run_command, validate_email


class ShowKind(str, Enum):
    PEOPLE = "people"
    QUESTIONNAIRES = "questionnaires"


class UpdateMode(str, Enum):
    ADD = "add"
    REMOVE = "remove"


CREATE_CONTEXT_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}


def show(
    ctx: typer.Context,
    kind: ShowKind = typer.Argument(..., help="What to list"),
) -> None:
    """
    List people or questionnaires.

    Examples:
        advisor -a staging show people
    """
    run_command(ctx, "show", [kind.value])


def delete(
    ctx: typer.Context,
    email: str = typer.Argument(..., callback=validate_email, help="Email of the person"),
) -> None:
    """
    Delete a person.

    Examples:
        advisor -a staging delete someone@example.com
    """
    run_command(ctx, "delete", [email])


def update(
    ctx: typer.Context,
    questionnaire_id: str = typer.Argument(..., help="Questionnaire to change"),
    mode: UpdateMode = typer.Argument(..., help="Add or remove the person"),
    email: str = typer.Argument(..., callback=validate_email, help="Email of the person"),
) -> None:
    """
    Add a person to, or remove a person from, a questionnaire.

    Examples:
        advisor -a staging update 123a add someone@example.com
    """
    run_command(ctx, "update", [questionnaire_id, mode.value, email])


def create(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="What to create (person)"),
) -> None:
    """
    Create a person from --key value pairs.

    Examples:
        advisor -a staging create person --name Steve --email steve@example.com
    """
    run_command(ctx, "create", [kind, *ctx.args])
