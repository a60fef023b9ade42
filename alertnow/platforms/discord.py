"""Discord handler: POST the rendered alert to an incoming webhook.

The request body is ``{"content": "<rendered alert>"}``.  Any 2xx
response counts as delivered; the response body is ignored.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

import httpx

from alertnow.errors import DispatchError
from alertnow.templates import render_content

logger = logging.getLogger(__name__)


def send_discord(
    endpoint: str,
    title: str,
    message: str,
    data: Optional[Mapping[str, Any]] = None,
) -> httpx.Response:
    """Post one alert to a Discord webhook.

    Args:
        endpoint: Discord webhook URL.
        title: Alert headline.
        message: Alert body.
        data: Optional extra fields.

    Returns:
        The successful :class:`httpx.Response`.

    Raises:
        DispatchError: On a transport failure or a non-2xx status.
    """
    payload = {"content": render_content(title, message, data)}

    try:
        resp = httpx.post(
            endpoint,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise DispatchError(f"Failed to send notification to Discord: {exc}") from exc

    if not resp.is_success:
        raise DispatchError(
            f"Discord API error: {resp.status_code} - {resp.text}",
            status_code=resp.status_code,
            response_text=resp.text,
        )

    logger.debug("Discord alert delivered (status %d)", resp.status_code)
    return resp
