"""Exception types raised (or reported) by AlertNow."""

from typing import Optional


class ConfigurationError(ValueError):
    """Raised synchronously when a builder is given invalid settings."""


class DispatchError(RuntimeError):
    """An alert could not be delivered.

    Never raised to the caller of :meth:`~alertnow.sender.AlertNow.send`;
    instances are handed to the sender's error reporter instead.

    Attributes:
        status_code: HTTP status returned by the platform, when known.
        response_text: Response body returned by the platform, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text
