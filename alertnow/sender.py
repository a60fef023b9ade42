"""The configured alert sender.

:meth:`AlertNow.send` never raises and never waits on the network: it
validates its arguments, hands the delivery to a background thread, and
returns.  Anything that goes wrong is passed to the sender's error
reporter, which logs by default.
"""

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from alertnow.errors import DispatchError
from alertnow.platforms import dispatch

logger = logging.getLogger(__name__)


def log_error(exc: Exception) -> None:
    """Default error reporter: log *exc* at ERROR level."""
    logger.error("AlertNow error: %s", exc, exc_info=exc)


def _run_in_background(target: Callable[..., Any], *args: Any) -> threading.Thread:
    """Start *target* on its own thread and return without joining it."""
    thread = threading.Thread(target=target, args=args, name="alertnow-dispatch")
    thread.start()
    return thread


@dataclass(frozen=True)
class AlertNow:
    """Immutable sender bound to one platform endpoint.

    Build instances with :class:`~alertnow.builder.AlertNowBuilder`
    rather than directly; the builder validates the configuration.

    Attributes:
        platform: Lower-case platform identifier, e.g. ``"discord"``.
        endpoint: Webhook URL the alerts are posted to.
        error_reporter: Callable receiving every validation or delivery
            error.  ``None`` selects :func:`log_error`.
    """

    platform: str
    endpoint: str = field(repr=False)
    error_reporter: Optional[Callable[[Exception], Any]] = field(
        default=None, repr=False, compare=False
    )

    def send(self, title: str, message: str, data: Optional[Mapping[str, Any]] = None) -> None:
        """Send an alert without waiting for the platform's response.

        Invalid arguments are reported, not raised, and nothing is sent.

        Args:
            title: Short headline, rendered in bold.
            message: Alert body.
            data: Optional extra fields, appended as JSON.
        """
        if not title or not isinstance(title, str):
            self._report(DispatchError("title is required and must be a string"))
            return
        if not message or not isinstance(message, str):
            self._report(DispatchError("message is required and must be a string"))
            return
        if data is not None and not isinstance(data, Mapping):
            self._report(DispatchError("data must be a mapping"))
            return

        try:
            _run_in_background(self._deliver, title, message, data)
        except Exception as exc:
            self._report(DispatchError(f"Failed to start delivery: {exc}"))

    def _deliver(self, title: str, message: str, data: Optional[Mapping[str, Any]]) -> None:
        """Background half of :meth:`send`."""
        try:
            dispatch(self.platform, self.endpoint, title, message, data)
        except Exception as exc:
            self._report(exc)

    def _report(self, exc: Exception) -> None:
        reporter = self.error_reporter or log_error
        try:
            reporter(exc)
        except Exception:
            logger.exception("Error reporter failed while handling: %s", exc)
