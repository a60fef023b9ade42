"""Tests for :mod:`alertnow.platforms`."""

from unittest.mock import patch

import httpx
import pytest

from alertnow.errors import DispatchError
from alertnow.platforms import dispatch
from alertnow.platforms.discord import send_discord

URL = "https://discord.com/api/webhooks/123/secret"


def _response(status_code, text=""):
    """Build a real httpx response for the test webhook."""
    return httpx.Response(status_code, text=text, request=httpx.Request("POST", URL))


class TestDispatch:
    """Verify platform routing."""

    @patch("alertnow.platforms.discord.send_discord")
    def test_dispatch_discord(self, mock_send):
        """'discord' routes to send_discord."""
        dispatch("discord", URL, "Title", "Body", {"k": "v"})
        mock_send.assert_called_once_with(URL, "Title", "Body", {"k": "v"})

    def test_dispatch_unknown(self):
        """Unknown platforms raise DispatchError."""
        with pytest.raises(DispatchError, match="No handler"):
            dispatch("carrier-pigeon", URL, "Title", "Body")


class TestSendDiscord:
    """Verify the Discord webhook request."""

    @pytest.mark.parametrize("status", [200, 201])
    def test_success(self, status):
        """2xx responses are returned and the body is ignored."""
        with patch("alertnow.platforms.discord.httpx.post", return_value=_response(status, "ignored")) as post:
            resp = send_discord(URL, "Title", "Body")
        assert resp.status_code == status
        post.assert_called_once_with(
            URL,
            json={"content": "**Title**\n\nmessage:```\n\nBody```\n\n"},
            headers={"Content-Type": "application/json"},
        )

    @pytest.mark.parametrize("status", [400, 404, 500])
    def test_error_status(self, status):
        """Non-2xx responses raise with status and body."""
        with patch("alertnow.platforms.discord.httpx.post", return_value=_response(status, "nope")):
            with pytest.raises(DispatchError) as excinfo:
                send_discord(URL, "Title", "Body")
        assert excinfo.value.status_code == status
        assert excinfo.value.response_text == "nope"
        assert str(excinfo.value) == f"Discord API error: {status} - nope"

    def test_transport_error(self):
        """httpx transport errors are wrapped."""
        with patch(
            "alertnow.platforms.discord.httpx.post",
            side_effect=httpx.ReadTimeout("timed out"),
        ):
            with pytest.raises(DispatchError, match="Failed to send notification") as excinfo:
                send_discord(URL, "Title", "Body")
        assert excinfo.value.status_code is None

    def test_invalid_url(self):
        """A URL httpx rejects is wrapped like a transport error."""
        with pytest.raises(DispatchError, match="Failed to send notification") as excinfo:
            send_discord("http://exa mple.com/\x00", "Title", "Body")
        assert isinstance(excinfo.value.__cause__, httpx.InvalidURL)
