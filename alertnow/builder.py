"""Fluent builder that validates configuration and produces senders."""

import logging
from typing import Any, Callable, Optional

from alertnow.config import Settings, get_settings
from alertnow.errors import ConfigurationError
from alertnow.sender import AlertNow

logger = logging.getLogger(__name__)

#: Platform identifiers accepted by :meth:`AlertNowBuilder.set_platform`.
SUPPORTED_PLATFORMS = frozenset({"discord"})


class AlertNowBuilder:
    """Accumulate sender settings, then :meth:`build` an :class:`AlertNow`.

    Example::

        alerts = (
            AlertNowBuilder()
            .set_platform("discord")
            .set_endpoint("https://discord.com/api/webhooks/...")
            .build()
        )
        alerts.send("Deploy finished", "api v2.3.1 is live")
    """

    def __init__(self) -> None:
        self._platform: Optional[str] = None
        self._endpoint: Optional[str] = None
        self._error_reporter: Optional[Callable[[Exception], Any]] = None

    def set_platform(self, identifier: str) -> "AlertNowBuilder":
        """Select the target platform (case-insensitive).

        Raises:
            ConfigurationError: If *identifier* is empty, not a string,
                or not in :data:`SUPPORTED_PLATFORMS`.
        """
        if not identifier or not isinstance(identifier, str):
            raise ConfigurationError("invalid platform: must be a non-empty string")

        normalized = identifier.lower()
        if normalized not in SUPPORTED_PLATFORMS:
            supported = ", ".join(sorted(SUPPORTED_PLATFORMS))
            raise ConfigurationError(
                f"invalid platform {identifier!r}: supported platforms are {supported}"
            )

        self._platform = normalized
        return self

    def set_endpoint(self, url: str) -> "AlertNowBuilder":
        """Set the webhook URL.  Any non-empty string is accepted.

        Raises:
            ConfigurationError: If *url* is empty or not a string.
        """
        if not url or not isinstance(url, str):
            raise ConfigurationError("invalid endpoint: must be a non-empty string")

        self._endpoint = url
        return self

    def set_error_reporter(self, reporter: Callable[[Exception], Any]) -> "AlertNowBuilder":
        """Route send/delivery errors to *reporter* instead of the log.

        Raises:
            ConfigurationError: If *reporter* is not callable.
        """
        if not callable(reporter):
            raise ConfigurationError("error reporter must be callable")

        self._error_reporter = reporter
        return self

    def build(self) -> AlertNow:
        """Return a new sender for the accumulated configuration.

        May be called repeatedly; each call returns an independent
        sender with the same settings.

        Raises:
            ConfigurationError: If the platform or endpoint is not set.
        """
        if not self._platform:
            raise ConfigurationError("platform not set")
        if not self._endpoint:
            raise ConfigurationError("endpoint not set")

        logger.debug("Built %s sender", self._platform)
        return AlertNow(
            platform=self._platform,
            endpoint=self._endpoint,
            error_reporter=self._error_reporter,
        )


def builder_from_settings(settings: Optional[Settings] = None) -> AlertNowBuilder:
    """Return a builder pre-filled from environment settings.

    Only values that are actually configured are applied, so the
    caller can still supply the rest before calling ``build()``.

    Args:
        settings: Explicit settings; defaults to :func:`get_settings`.

    Raises:
        ConfigurationError: If a configured platform is unsupported.
    """
    cfg = settings or get_settings()
    builder = AlertNowBuilder()
    if cfg.platform:
        builder.set_platform(cfg.platform)
    if cfg.webhook_url:
        builder.set_endpoint(cfg.webhook_url)
    return builder
