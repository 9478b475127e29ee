"""Service layer exports.

 - ``EventBus`` publish/subscribe core
 - ``ViewportState`` holder for the current metrics snapshot

The Qt bridge (``services.resize_observer``) is imported explicitly so that
importing this package never pulls in PyQt6.
"""

from .event_bus import EventBus, ViewportEvent  # noqa: F401
from .viewport_state import ViewportState  # noqa: F401

__all__ = [
    "EventBus",
    "ViewportEvent",
    "ViewportState",
]
