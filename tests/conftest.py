"""Shared pytest fixtures for the AlertNow test suite.

Delivery normally runs on a background thread; most tests swap in an
inline runner so assertions can be made as soon as ``send`` returns.
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from alertnow import AlertNow, AlertNowBuilder


@pytest.fixture()
def webhook_url() -> str:
    """A syntactically valid Discord webhook URL."""
    return "https://discord.com/api/webhooks/123/secret"


@pytest.fixture()
def reporter():
    """A mock error reporter that records every reported exception."""
    return MagicMock()


@pytest.fixture()
def sender(webhook_url, reporter) -> AlertNow:
    """A Discord sender wired to the mock reporter."""
    return (
        AlertNowBuilder()
        .set_platform("discord")
        .set_endpoint(webhook_url)
        .set_error_reporter(reporter)
        .build()
    )


@pytest.fixture()
def inline_dispatch():
    """Run background deliveries synchronously inside ``send``."""

    def _run_inline(target, *args):
        target(*args)

    with patch("alertnow.sender._run_in_background", side_effect=_run_inline) as mock_run:
        yield mock_run


@pytest.fixture()
def mock_post(webhook_url):
    """Patch ``httpx.post`` to answer 204 No Content."""
    response = httpx.Response(204, request=httpx.Request("POST", webhook_url))
    with patch("alertnow.platforms.discord.httpx.post", return_value=response) as post:
        yield post
