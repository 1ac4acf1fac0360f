"""Single-shot JSON GET that maps httpx failures onto FetchError kinds."""

import logging
from typing import Any

import httpx

from weatherwidget.models.errors import NetworkError, ParseError, UpstreamError

logger = logging.getLogger(__name__)


def get_json(
    url: str,
    params: dict[str, Any],
    source: str,
    timeout: float,
    user_agent: str,
) -> Any:
    """GET `url` and decode the body. No retries.

    Raises NetworkError, UpstreamError or ParseError.
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    try:
        resp = httpx.get(url, params=params, headers=headers, timeout=timeout)
    except httpx.RequestError as e:
        # Params carry user input; keep them out of the log line
        logger.error("%s request to %s failed: %s", source, url, type(e).__name__)
        raise NetworkError(f"{source} request failed: {e}", source) from e

    if not resp.is_success:
        logger.error("%s returned HTTP %d from %s", source, resp.status_code, url)
        raise UpstreamError(
            f"{source} returned HTTP {resp.status_code}", source, resp.status_code
        )

    try:
        return resp.json()
    except ValueError as e:
        logger.error("%s returned a non-JSON body from %s", source, url)
        raise ParseError(f"{source} returned invalid JSON", source) from e
