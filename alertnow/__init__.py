"""AlertNow: fire-and-forget alert notifications for webhook platforms.

Configure a sender once with :class:`AlertNowBuilder`, then call
:meth:`AlertNow.send` from anywhere; delivery happens in the background
and failures are reported through logging instead of being raised.
"""

from alertnow.builder import SUPPORTED_PLATFORMS, AlertNowBuilder, builder_from_settings
from alertnow.errors import ConfigurationError, DispatchError
from alertnow.sender import AlertNow

__version__ = "0.1.0"

__all__ = [
    "SUPPORTED_PLATFORMS",
    "AlertNow",
    "AlertNowBuilder",
    "ConfigurationError",
    "DispatchError",
    "builder_from_settings",
]
