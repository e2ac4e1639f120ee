"""Single-attempt HTTP GET used by the catalog and audio fetchers."""

import httpx

from voicecatalog.lib.exceptions import TransportError


def is_remote(location: str) -> bool:
    """True when ``location`` is an http(s) URL rather than a file path."""
    return location.lower().startswith(("http://", "https://"))


async def http_get(
    url: str,
    timeout: float,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """
    GET ``url`` once and return the response if it has a 2xx status.

    An injected client is used as-is and left open. Without one, a
    client is created for this call only.

    Raises:
        TransportError: On network faults, timeouts and non-2xx statuses
    """
    try:
        if client is not None:
            response = await client.get(url, follow_redirects=True)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(url, follow_redirects=True)
    except httpx.TimeoutException as e:
        # An injected client applies its own timeout, not ours.
        message = "Request timed out" if client is not None else f"Request timed out after {timeout}s"
        raise TransportError(
            message,
            location=url,
            original_error=e,
        ) from e
    except httpx.HTTPError as e:
        raise TransportError(
            f"Network error: {str(e)}",
            location=url,
            original_error=e,
        ) from e

    if not response.is_success:
        reason = response.reason_phrase or "request failed"
        raise TransportError(
            f"HTTP {response.status_code} {reason}",
            location=url,
            status_code=response.status_code,
        )

    return response
