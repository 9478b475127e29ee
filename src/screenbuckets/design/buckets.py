"""Bucket model: pixel ranges on one screen axis.

A bucket is an inclusive range ``[min, max]`` on either the width or the height
axis. Either edge may be unbounded: an unbounded minimum means "no lower limit"
and an unbounded maximum means "no upper limit". Buckets are immutable values
and are normally built once, at import time, by the catalog module.

Design Goals
------------
 - Keep the range arithmetic in one place so callers never compare raw pixel
   numbers themselves.
 - Derive adjacent and composite buckets (``step_below``, ``encompass``) instead
   of authoring every edge by hand; adjacent buckets then cannot gap or overlap.
 - Pure functions over frozen dataclasses; no Qt dependency.

Membership (``in_bucket``)
--------------------------
 ==========  ==========  ========================
 min         max         result
 ==========  ==========  ========================
 unbounded   unbounded   always True
 unbounded   fixed(M)    value <= M
 fixed(m)    unbounded   value >= m
 fixed(m)    fixed(M)    m <= value <= M
 ==========  ==========  ========================
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple, TypeVar

__all__ = [
    "Axis",
    "Boundary",
    "Bucket",
    "BucketDefinitionError",
    "SupportsDimensions",
    "UNBOUNDED",
    "create",
    "encompass",
    "step_below",
    "in_bucket",
    "is_in",
    "to_value_bucket",
]

T = TypeVar("T")


class BucketDefinitionError(ValueError):
    """Raised when a bucket would be empty, inverted or built across axes."""


class Axis(str, Enum):
    """Screen dimension a bucket measures."""

    WIDTH = "width"
    HEIGHT = "height"


@dataclass(frozen=True)
class Boundary:
    """One edge of a bucket.

    Attributes
    ----------
    value: int | None
        Inclusive pixel value, or None when the edge has no limit.
    """

    value: Optional[int] = None

    @classmethod
    def fixed(cls, value: int) -> "Boundary":
        return cls(int(value))

    @property
    def is_unbounded(self) -> bool:
        return self.value is None

    def as_min(self) -> float:
        """Numeric value when used as a minimum (unbounded sorts below everything)."""
        return -math.inf if self.value is None else self.value

    def as_max(self) -> float:
        """Numeric value when used as a maximum (unbounded sorts above everything)."""
        return math.inf if self.value is None else self.value

    def __repr__(self) -> str:
        return "UNBOUNDED" if self.value is None else f"Boundary.fixed({self.value})"


UNBOUNDED = Boundary()


@dataclass(frozen=True)
class Bucket:
    min: Boundary
    max: Boundary
    axis: Axis

    def contains(self, value: int) -> bool:
        return in_bucket(self, value)


class SupportsDimensions(Protocol):
    width: int
    height: int


def create(axis: Axis, min: Boundary, max: Boundary) -> Bucket:  # noqa: A002
    """Build a bucket on ``axis`` covering ``min``..``max`` inclusive.

    Raises
    ------
    BucketDefinitionError
        If both edges are fixed and ``min > max``, or if a fixed minimum is not
        positive (a range starting at zero must use ``UNBOUNDED``).
    """
    if min.value is not None and min.value <= 0:
        raise BucketDefinitionError(
            f"Fixed minimum must be positive, got {min.value}; use UNBOUNDED for zero"
        )
    if min.value is not None and max.value is not None and min.value > max.value:
        raise BucketDefinitionError(
            f"Inverted {axis.value} bucket: min {min.value} > max {max.value}"
        )
    return Bucket(min=min, max=max, axis=axis)


def encompass(axis: Axis, low: Bucket, high: Bucket) -> Bucket:
    """Return a bucket spanning from ``low.min`` to ``high.max``.

    Used to build broad tiers from a contiguous run of fine buckets.
    """
    for part in (low, high):
        if part.axis is not axis:
            raise BucketDefinitionError(
                f"Cannot encompass a {part.axis.value} bucket on the {axis.value} axis"
            )
    return create(axis, low.min, high.max)


def step_below(bucket: Bucket) -> Boundary:
    """Boundary ending exactly one pixel before ``bucket`` begins."""
    if bucket.min.value is None:
        return UNBOUNDED
    return Boundary.fixed(bucket.min.value - 1)


def in_bucket(bucket: Bucket, value: int) -> bool:
    lo, hi = bucket.min.value, bucket.max.value
    if lo is None and hi is None:
        return True
    if lo is None:
        return value <= hi
    if hi is None:
        return value >= lo
    return lo <= value <= hi


def is_in(buckets: Sequence[Bucket], metrics: SupportsDimensions) -> bool:
    """True if ``metrics`` falls inside any of ``buckets``.

    Each bucket is tested against the metrics value of its own axis, so width
    and height buckets can be mixed in one call. An empty sequence is False.
    """
    for bucket in buckets:
        value = metrics.width if bucket.axis is Axis.WIDTH else metrics.height
        if in_bucket(bucket, value):
            return True
    return False


def to_value_bucket(value: int, ordered: Sequence[Tuple[T, Bucket]]) -> T:
    """Return the tag of the first bucket (ascending order) containing ``value``.

    The last tag is returned when nothing matches before it; in a contiguous
    tier the last bucket is open-ended and always matches anyway.
    """
    if not ordered:
        raise ValueError("ordered buckets must not be empty")
    for tag, bucket in ordered[:-1]:
        if in_bucket(bucket, value):
            return tag
    return ordered[-1][0]
