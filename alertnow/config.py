"""Library configuration via environment variables and defaults."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Default AlertNow configuration loaded from environment / ``.env``.

    Attributes:
        platform: Platform identifier used by
            :func:`~alertnow.builder.builder_from_settings`.
        webhook_url: Webhook endpoint secret for that platform.  Empty
            means "not configured".
        log_level: Python logging level name applied by
            :func:`configure_logging`.
    """

    platform: str = "discord"
    webhook_url: str = ""
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "ALERTNOW_",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings on first use and reuse them afterwards.

    Nothing is read from the environment or ``.env`` until the first call.
    """
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic stream handler for applications without one.

    The library itself never touches logging handlers; call this from
    an entry point if alert errors should show up on stderr.

    Args:
        level: Logging level name.  Defaults to ``Settings.log_level``.
    """
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
