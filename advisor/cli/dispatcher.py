"""
Command Dispatcher.

Maps a resolved Instance and a Command onto one HTTP call and interprets
the response. Every Command variant is either routed, explicitly unwired,
or Unrecognized; the last two fail fast without touching the network.
"""

from collections.abc import Callable
from dataclasses import dataclass

import httpx
from rich.console import RenderableType

from advisor.cli.client import execute
from advisor.cli.render import render_people
from advisor.core.config import AdvisorSettings, get_settings
from advisor.core.exceptions import UnsupportedCommand
from advisor.core.logging import get_logger
from advisor.domain.commands import (
    AddPersonToQuestionnaire,
    Command,
    CreatePerson,
    DeletePerson,
    Healthcheck,
    RemovePersonFromQuestionnaire,
    ShowPeople,
    ShowQuestionnaires,
    Unrecognized,
)
from advisor.domain.registry import NO_AUTH, Instance

logger = get_logger(__name__)


@dataclass(frozen=True)
class Route:
    """HTTP endpoint behind a command."""

    path: str
    authenticated: bool
    timeout: Callable[[AdvisorSettings], float]
    render: Callable[[str], RenderableType] | None = None


ROUTES: dict[type[Command], Route] = {
    Healthcheck: Route(
        path="/healthcheck",
        authenticated=False,
        timeout=lambda settings: settings.healthcheck_timeout,
    ),
    ShowPeople: Route(
        path="/admin/people",
        authenticated=True,
        timeout=lambda settings: settings.listing_timeout,
        render=render_people,
    ),
}

# No advisor API endpoint exists for these yet.
UNWIRED: frozenset[type[Command]] = frozenset({
    ShowQuestionnaires,
    DeletePerson,
    CreatePerson,
    AddPersonToQuestionnaire,
    RemovePersonFromQuestionnaire,
})


async def dispatch(
    instance: Instance,
    command: Command,
    settings: AdvisorSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RenderableType:
    """
    Run a command against an advisor app.

    Args:
        instance: The resolved app.
        command: The parsed command.
        settings: Process settings (timeouts). Defaults to get_settings().
        transport: Optional httpx transport, used by tests.

    Returns:
        The response body, or a Rich renderable built from it.

    Raises:
        UnsupportedCommand: For Unrecognized or unwired commands.
        RemoteAPIError: On transport failure.
        MalformedResponse: If the body cannot be rendered.
    """
    if isinstance(command, Unrecognized):
        raise UnsupportedCommand(f"Unrecognized command: {' '.join(command.raw_tokens)}")

    route = ROUTES.get(type(command))
    if route is None:
        raise UnsupportedCommand(f"{command.name} is not supported by the advisor API yet")

    settings = settings or get_settings()
    auth = instance.authentication if route.authenticated else NO_AUTH
    if route.authenticated and auth is NO_AUTH:
        logger.warning("No token configured for app", app=instance.name, command=command.name)

    logger.info("Dispatching command", app=instance.name, command=command.name, path=route.path)

    body = await execute(
        instance.url_for(route.path),
        auth,
        route.timeout(settings),
        transport=transport,
    )

    if route.render is None:
        return body
    return route.render(body)
