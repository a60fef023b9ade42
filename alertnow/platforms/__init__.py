"""Platform handlers.

The :func:`dispatch` function is the single entry point.  It selects
the handler for *platform* and delegates delivery to it.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from alertnow.errors import DispatchError

logger = logging.getLogger(__name__)


def dispatch(
    platform: str,
    endpoint: str,
    title: str,
    message: str,
    data: Optional[Mapping[str, Any]] = None,
) -> None:
    """Deliver one alert through the handler for *platform*.

    Args:
        platform: Lower-case platform identifier, e.g. ``"discord"``.
        endpoint: Webhook URL.
        title: Alert headline.
        message: Alert body.
        data: Optional extra fields.

    Raises:
        DispatchError: If no handler exists or delivery fails.
    """
    if platform == "discord":
        from alertnow.platforms.discord import send_discord

        send_discord(endpoint, title, message, data)
    else:
        raise DispatchError(f"No handler for platform: {platform}")
