"""Named screen bucket catalog.

Canonical tiers (boundaries in ``config.settings``):

Width, fine tier
 - handset1:  <= 351px
 - handset2:  352 - 383px
 - handset3:  384 - 511px
 - portable1: 512 - 863px
 - portable2: 864 - 1023px
 - portable3: 1024 - 1279px
 - wide1:     1280 - 1919px
 - wide2:     >= 1920px

Width, broad tier (derived with ``encompass`` from the fine tier)
 - handset:  handset1 .. handset3
 - portable: portable1 .. portable3
 - wide:     wide1 .. wide2

Height tier
 - limited: <= 511px
 - medium:  512 - 863px
 - tall:    >= 864px

Construction is table-first: the settings module lists raw minimums, and each
tier is built from its top bucket downwards so every maximum is ``step_below``
of the following bucket. ``validate_catalog`` runs at import time and fails
fast if an edit to the tables breaks contiguity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple, Type, TypeVar

from ..config import settings
from .buckets import (
    UNBOUNDED,
    Axis,
    Boundary,
    Bucket,
    SupportsDimensions,
    create,
    encompass,
    step_below,
    to_value_bucket,
)

__all__ = [
    "CatalogIntegrityError",
    "WidthBroad",
    "WidthFine",
    "HeightClass",
    "ScreenClass",
    "WIDTH_FINE_TIER",
    "WIDTH_BROAD_TIER",
    "HEIGHT_TIER",
    "HANDSET1",
    "HANDSET2",
    "HANDSET3",
    "PORTABLE1",
    "PORTABLE2",
    "PORTABLE3",
    "WIDE1",
    "WIDE2",
    "HANDSET",
    "PORTABLE",
    "WIDE",
    "LIMITED",
    "MEDIUM",
    "TALL",
    "list_buckets",
    "get_bucket",
    "classify_width",
    "classify_width_fine",
    "classify_height",
    "classify",
    "validate_catalog",
]

_log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
Tier = Tuple[Tuple[E, Bucket], ...]


class CatalogIntegrityError(RuntimeError):
    """Raised when catalog tiers gap, overlap or lose their open ends."""


class WidthBroad(str, Enum):
    HANDSET = "handset"
    PORTABLE = "portable"
    WIDE = "wide"


class WidthFine(str, Enum):
    HANDSET1 = "handset1"
    HANDSET2 = "handset2"
    HANDSET3 = "handset3"
    PORTABLE1 = "portable1"
    PORTABLE2 = "portable2"
    PORTABLE3 = "portable3"
    WIDE1 = "wide1"
    WIDE2 = "wide2"


class HeightClass(str, Enum):
    LIMITED = "limited"
    MEDIUM = "medium"
    TALL = "tall"


def _build_tier(axis: Axis, tags: Type[E], breakpoints: Sequence[int]) -> Tier:
    members = list(tags)
    if len(members) != len(breakpoints) + 1:
        raise CatalogIntegrityError(
            f"{tags.__name__} has {len(members)} tags but {len(breakpoints)} breakpoints"
        )
    mins: List[Boundary] = [UNBOUNDED] + [Boundary.fixed(bp) for bp in breakpoints]
    built: List[Bucket] = []
    upper = UNBOUNDED
    for lower in reversed(mins):
        bucket = create(axis, lower, upper)
        built.append(bucket)
        upper = step_below(bucket)
    built.reverse()
    return tuple(zip(members, built))


WIDTH_FINE_TIER: Tier = _build_tier(Axis.WIDTH, WidthFine, settings.WIDTH_FINE_BREAKPOINTS)
HEIGHT_TIER: Tier = _build_tier(Axis.HEIGHT, HeightClass, settings.HEIGHT_BREAKPOINTS)

_FINE: Dict[WidthFine, Bucket] = dict(WIDTH_FINE_TIER)

HANDSET1 = _FINE[WidthFine.HANDSET1]
HANDSET2 = _FINE[WidthFine.HANDSET2]
HANDSET3 = _FINE[WidthFine.HANDSET3]
PORTABLE1 = _FINE[WidthFine.PORTABLE1]
PORTABLE2 = _FINE[WidthFine.PORTABLE2]
PORTABLE3 = _FINE[WidthFine.PORTABLE3]
WIDE1 = _FINE[WidthFine.WIDE1]
WIDE2 = _FINE[WidthFine.WIDE2]

# Broad tag -> (first, last) fine constituent
_BROAD_SPANS: Dict[WidthBroad, Tuple[WidthFine, WidthFine]] = {
    WidthBroad.HANDSET: (WidthFine.HANDSET1, WidthFine.HANDSET3),
    WidthBroad.PORTABLE: (WidthFine.PORTABLE1, WidthFine.PORTABLE3),
    WidthBroad.WIDE: (WidthFine.WIDE1, WidthFine.WIDE2),
}

HANDSET = encompass(Axis.WIDTH, HANDSET1, HANDSET3)
PORTABLE = encompass(Axis.WIDTH, PORTABLE1, PORTABLE3)
WIDE = encompass(Axis.WIDTH, WIDE1, WIDE2)

WIDTH_BROAD_TIER: Tier = (
    (WidthBroad.HANDSET, HANDSET),
    (WidthBroad.PORTABLE, PORTABLE),
    (WidthBroad.WIDE, WIDE),
)

_HEIGHT: Dict[HeightClass, Bucket] = dict(HEIGHT_TIER)

LIMITED = _HEIGHT[HeightClass.LIMITED]
MEDIUM = _HEIGHT[HeightClass.MEDIUM]
TALL = _HEIGHT[HeightClass.TALL]


_REGISTRY: Dict[str, Bucket] = {}


def _register(name: str, bucket: Bucket) -> None:
    if name in _REGISTRY:
        raise ValueError(f"Duplicate bucket name: {name}")
    _REGISTRY[name] = bucket


for _tier in (WIDTH_BROAD_TIER, WIDTH_FINE_TIER, HEIGHT_TIER):
    for _tag, _bucket in _tier:
        _register(_tag.value, _bucket)


def list_buckets() -> List[Tuple[str, Bucket]]:
    """All named buckets: broad width, fine width, then height."""
    return list(_REGISTRY.items())


def get_bucket(name: str) -> Bucket:
    bucket = _REGISTRY.get(name)
    if bucket is None:
        raise KeyError(f"Unknown bucket name: {name}")
    return bucket


@dataclass(frozen=True)
class ScreenClass:
    """Tags of every tier for one metrics snapshot."""

    width: WidthBroad
    width_fine: WidthFine
    height: HeightClass


def classify_width(value: int) -> WidthBroad:
    return to_value_bucket(value, WIDTH_BROAD_TIER)


def classify_width_fine(value: int) -> WidthFine:
    return to_value_bucket(value, WIDTH_FINE_TIER)


def classify_height(value: int) -> HeightClass:
    return to_value_bucket(value, HEIGHT_TIER)


def classify(metrics: SupportsDimensions) -> ScreenClass:
    return ScreenClass(
        width=classify_width(metrics.width),
        width_fine=classify_width_fine(metrics.width),
        height=classify_height(metrics.height),
    )


def _check_tier(name: str, tier: Tier) -> None:
    if not tier:
        raise CatalogIntegrityError(f"{name} tier is empty")
    first, last = tier[0][1], tier[-1][1]
    if not first.min.is_unbounded:
        raise CatalogIntegrityError(f"{name} tier must start unbounded, got {first.min!r}")
    if not last.max.is_unbounded:
        raise CatalogIntegrityError(f"{name} tier must end unbounded, got {last.max!r}")
    axes = {bucket.axis for _, bucket in tier}
    if len(axes) != 1:
        raise CatalogIntegrityError(f"{name} tier mixes axes: {sorted(a.value for a in axes)}")
    for (tag_a, a), (tag_b, b) in zip(tier, tier[1:]):
        if a.max.value is None or b.min.value is None or a.max.value != b.min.value - 1:
            raise CatalogIntegrityError(
                f"{name} tier not contiguous between {tag_a.value} ({a.max!r}) "
                f"and {tag_b.value} ({b.min!r})"
            )


def validate_catalog() -> None:
    """Verify every tier partitions its axis and broad buckets match fine ones."""
    _check_tier("width-fine", WIDTH_FINE_TIER)
    _check_tier("width-broad", WIDTH_BROAD_TIER)
    _check_tier("height", HEIGHT_TIER)
    for tag, bucket in WIDTH_BROAD_TIER:
        first, last = _BROAD_SPANS[tag]
        if bucket.min != _FINE[first].min or bucket.max != _FINE[last].max:
            raise CatalogIntegrityError(
                f"{tag.value} does not span {first.value}..{last.value}"
            )
    _log.debug(
        "catalog validated: %d fine width, %d broad width, %d height buckets",
        len(WIDTH_FINE_TIER),
        len(WIDTH_BROAD_TIER),
        len(HEIGHT_TIER),
    )


validate_catalog()
