"""Viewport metrics snapshot.

``Metrics`` is a frozen width/height pair. Updates always build a new value so
a reader never sees width from one resize and height from another.

Float inputs (fractional logical pixels from high-DPI screens) are always
rounded up, never to nearest: 512.1px becomes 513, not 512.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .buckets import Axis

__all__ = ["Metrics"]

Number = Union[int, float]


def _to_px(value: Number) -> int:
    if isinstance(value, float):
        return math.ceil(value)
    return int(value)


@dataclass(frozen=True)
class Metrics:
    width: int = 0
    height: int = 0

    @classmethod
    def zero(cls) -> "Metrics":
        return cls(0, 0)

    @classmethod
    def from_ints(cls, width: int, height: int) -> "Metrics":
        return cls(int(width), int(height))

    @classmethod
    def from_floats(cls, width: float, height: float) -> "Metrics":
        """Build metrics from fractional pixels, rounding each value up."""
        return cls(math.ceil(width), math.ceil(height))

    def set(self, width: Number, height: Number) -> "Metrics":
        """Return a new snapshot; floats are rounded up, ints are kept as is."""
        return Metrics(_to_px(width), _to_px(height))

    def value_for(self, axis: Axis) -> int:
        return self.width if axis is Axis.WIDTH else self.height
