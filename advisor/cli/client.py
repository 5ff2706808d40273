"""
HTTP Executor.

Performs a single timed GET against an advisor app. Every transport
failure, timeout, or non-2xx status is reported as RemoteAPIError.
"""

import asyncio

import httpx

from advisor import __version__
from advisor.core.exceptions import RemoteAPIError
from advisor.core.logging import get_logger
from advisor.domain.registry import NO_AUTH, Authentication, BearerAuth

logger = get_logger(__name__)

USER_AGENT = f"advisor-cli/{__version__}"


def auth_headers(auth: Authentication) -> dict[str, str]:
    """Headers to attach for the given authentication."""
    if isinstance(auth, BearerAuth):
        return {"Authorization": f"Bearer {auth.token}"}
    return {}


async def _fetch(
    url: str,
    headers: dict[str, str],
    timeout: float,
    transport: httpx.AsyncBaseTransport | None,
) -> httpx.Response:
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    ) as client:
        return await client.get(url, headers=headers)


async def execute(
    url: str,
    auth: Authentication = NO_AUTH,
    timeout: float = 1.0,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """
    GET `url` and return the response body.

    Args:
        url: Absolute URL to request.
        auth: NoAuth, or BearerAuth to send an Authorization header.
        timeout: Deadline in seconds for connect, headers and body together.
        transport: Optional httpx transport, used by tests.

    Returns:
        The response body as text.

    Raises:
        RemoteAPIError: On connection failure, timeout, or non-2xx status.
    """
    logger.debug("API request", method="GET", url=url, auth=type(auth).__name__, timeout=timeout)

    try:
        response = await asyncio.wait_for(
            _fetch(url, auth_headers(auth), timeout, transport),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        logger.info("API request timed out", url=url, timeout=timeout)
        raise RemoteAPIError(f"Error reading remote API: no response from {url} within {timeout}s") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.info("API request failed", url=url, error=str(e))
        raise RemoteAPIError(f"Error reading remote API: {e}") from e

    logger.debug("API response", url=url, status_code=response.status_code)

    if not response.is_success:
        raise RemoteAPIError(
            f"Error reading remote API: {url} responded with status {response.status_code}"
        )

    return response.text
