"""
Single-attempt HTTP GET shared by the content providers.

Each call opens a short-lived ``httpx.AsyncClient``, issues one GET and maps
failures onto the provider error taxonomy:

- I/O failure (connect, read, timeout...) -> TransportError
- status outside [200, 299]              -> InvalidResponseError
- body that is not JSON                  -> DecodeError

There is no retry and no caching: every trigger issues a fresh request.
"""

import logging
from typing import Any, Optional

import httpx

from policies import APP_RULES
from tools.errors import DecodeError, InvalidResponseError, TransportError

logger = logging.getLogger(__name__)

_HTTP_RULES = APP_RULES.get("http", {})

DEFAULT_TIMEOUT = _HTTP_RULES.get("request_timeout_seconds", 10)
USER_AGENT = _HTTP_RULES.get("user_agent", "MyCosmo/1.0")


async def send_get(
    url: str,
    params: dict,
    operation_name: str,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    check_status: bool = True,
) -> httpx.Response:
    """
    Issue one GET request.

    Args:
        url: Endpoint URL
        params: Query parameters
        operation_name: Name for logging purposes
        timeout: Request timeout in seconds (defaults to policy value)
        transport: Optional transport, used to plug in test doubles
        check_status: Reject responses outside the 2xx range

    Returns:
        The raw response

    Raises:
        TransportError: If the request could not be completed
        InvalidResponseError: If ``check_status`` and the status is not 2xx
    """
    try:
        async with httpx.AsyncClient(
            timeout=timeout or DEFAULT_TIMEOUT,
            transport=transport,
            headers={"User-Agent": USER_AGENT},
        ) as client:
            response = await client.get(url, params=params)
    except httpx.HTTPError as e:
        logger.warning(f"{operation_name}: Request error - {str(e)}")
        raise TransportError(f"{operation_name} request failed: {e}") from e

    if check_status and not 200 <= response.status_code <= 299:
        logger.warning(
            f"{operation_name}: HTTP {response.status_code} - "
            f"{response.text[:200]}"
        )
        raise InvalidResponseError(response.status_code)

    logger.info(f"{operation_name}: HTTP {response.status_code}")
    return response


def decode_json(response: httpx.Response, operation_name: str) -> Any:
    """
    Parse a response body as JSON.

    Raises:
        DecodeError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        logger.warning(f"{operation_name}: Body is not valid JSON")
        raise DecodeError(f"{operation_name} returned a non-JSON body") from e
