"""Qt resize bridge feeding ``ViewportState``.

Installs an event filter on a top-level widget and forwards every resize to
``ViewportState.resize``. Bucket evaluation and event publishing stay in the
pure-Python state object; this module is only the Qt glue.
"""

from __future__ import annotations

import logging
from typing import Dict

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QWidget

from .viewport_state import ViewportState

__all__ = ["ViewportResizeObserver"]

_log = logging.getLogger(__name__)


class ViewportResizeObserver(QObject):
    """Forward resize events of watched widgets to a ``ViewportState``."""

    def __init__(self, state: ViewportState, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state = state
        self._watched: Dict[int, QWidget] = {}

    @property
    def state(self) -> ViewportState:
        return self._state

    def observe(self, widget: QWidget) -> None:
        wid = id(widget)
        if wid in self._watched:
            return
        widget.installEventFilter(self)
        self._watched[wid] = widget
        # Seed with the current size so the state is valid before the first resize.
        self._state.resize(widget.width(), widget.height())
        _log.debug("observing %s at %dx%d", type(widget).__name__, widget.width(), widget.height())

    def unobserve(self, widget: QWidget) -> None:
        if self._watched.pop(id(widget), None) is not None:
            widget.removeEventFilter(self)

    def watched_count(self) -> int:
        return len(self._watched)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt override
        if event.type() == QEvent.Type.Resize and id(obj) in self._watched:
            if isinstance(event, QResizeEvent):
                size = event.size()
                self._state.resize(size.width(), size.height())
        return super().eventFilter(obj, event)
