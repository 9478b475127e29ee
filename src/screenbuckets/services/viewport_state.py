"""Current viewport metrics and their bucket classification.

``ViewportState`` owns the only mutable piece of the library: the latest
``Metrics`` snapshot. Each resize builds a complete new snapshot and swaps it
in under a lock, so concurrent readers see either the old or the new pair and
never a width from one resize with a height from another.

Events (published on the optional ``EventBus``):
 - ``metrics_changed``: payload ``{"old": Metrics, "new": Metrics}``; only when
   the rounded values differ.
 - ``screen_class_changed``: payload ``{"old": ScreenClass, "new": ScreenClass}``;
   only when at least one tier tag changes.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Optional, Sequence, Union

from ..design.buckets import Bucket, is_in
from ..design.catalog import ScreenClass, classify
from ..design.metrics import Metrics
from .event_bus import EventBus, ViewportEvent

__all__ = ["ViewportState"]

_log = logging.getLogger(__name__)


class ViewportState:
    def __init__(self, bus: Optional[EventBus] = None, metrics: Optional[Metrics] = None) -> None:
        self._lock = RLock()
        self._bus = bus
        self._metrics = metrics if metrics is not None else Metrics.zero()
        self._screen_class = classify(self._metrics)

    @property
    def metrics(self) -> Metrics:
        with self._lock:
            return self._metrics

    @property
    def screen_class(self) -> ScreenClass:
        with self._lock:
            return self._screen_class

    def resize(self, width: Union[int, float], height: Union[int, float]) -> Metrics:
        """Replace the snapshot; float sizes are rounded up to whole pixels."""
        with self._lock:
            old_metrics = self._metrics
            old_class = self._screen_class
            new_metrics = old_metrics.set(width, height)
            if new_metrics == old_metrics:
                return old_metrics
            new_class = classify(new_metrics)
            self._metrics = new_metrics
            self._screen_class = new_class
        _log.debug("viewport resized %s -> %s", old_metrics, new_metrics)
        if self._bus is not None:
            self._bus.publish(
                ViewportEvent.METRICS_CHANGED, {"old": old_metrics, "new": new_metrics}
            )
        if new_class != old_class:
            _log.debug("screen class changed %s -> %s", old_class, new_class)
            if self._bus is not None:
                self._bus.publish(
                    ViewportEvent.SCREEN_CLASS_CHANGED, {"old": old_class, "new": new_class}
                )
        return new_metrics

    def is_in(self, buckets: Sequence[Bucket]) -> bool:
        return is_in(buckets, self.metrics)
