"""CSS media query projection for buckets.

Turns a ``Bucket`` into ``min-<dim>`` / ``max-<dim>`` pixel features and wraps
style rules in an ``@media`` block guarded by one or more buckets.

Projection table (``<dim>`` is ``width`` or ``height`` from the bucket axis):

 ==========  ==========  =====================================
 min         max         features
 ==========  ==========  =====================================
 unbounded   fixed(M)    (max-<dim>: Mpx)
 unbounded   unbounded   (max-<dim>: 0px)
 fixed(m)    fixed(M)    (min-<dim>: mpx) and (max-<dim>: Mpx)
 fixed(m)    unbounded   (min-<dim>: mpx)
 ==========  ==========  =====================================

Several buckets passed to ``with_media`` produce a comma separated query list,
i.e. the block applies when any of them matches. Output is deterministic so it
can be snapshot tested.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from ..config import settings
from .buckets import Bucket

__all__ = [
    "MediaFeature",
    "MediaQuery",
    "StyleBlock",
    "to_media_query",
    "with_media",
]


def _format_px(value: float) -> str:
    text = f"{value:g}" if value != int(value) else str(int(value))
    return f"{text}{settings.PX_UNIT}"


@dataclass(frozen=True)
class MediaFeature:
    name: str  # e.g. "min-width"
    px: float

    def to_css(self) -> str:
        return f"({self.name}: {_format_px(self.px)})"


@dataclass(frozen=True)
class MediaQuery:
    """Conjunction of features for a single media type."""

    features: Tuple[MediaFeature, ...]
    media_type: str = settings.MEDIA_TYPE

    def to_css(self) -> str:
        return " and ".join([self.media_type] + [f.to_css() for f in self.features])


@dataclass(frozen=True)
class StyleBlock:
    """Style rules guarded by alternative media queries."""

    queries: Tuple[MediaQuery, ...]
    rules: Tuple[str, ...]

    def to_css(self) -> str:
        prelude = ", ".join(q.to_css() for q in self.queries)
        body = "".join(f"  {rule}\n" for rule in self.rules)
        return f"@media {prelude} {{\n{body}}}\n"


def to_media_query(bucket: Bucket) -> MediaQuery:
    dim = bucket.axis.value
    lo, hi = bucket.min.value, bucket.max.value
    features: list[MediaFeature] = []
    if lo is not None:
        features.append(MediaFeature(f"min-{dim}", float(lo)))
    if hi is not None:
        features.append(MediaFeature(f"max-{dim}", float(hi)))
    elif lo is None:
        # Both ends open: no real constraint exists, emit the historical fallback.
        features.append(MediaFeature(f"max-{dim}", 0.0))
    return MediaQuery(features=tuple(features))


def with_media(buckets: Sequence[Bucket], styles: Union[str, Iterable[str]]) -> StyleBlock:
    """Guard ``styles`` with the media queries of ``buckets`` (OR'd together).

    Parameters
    ----------
    buckets: Buckets whose ranges enable the styles; at least one required.
    styles: A single rule string or an iterable of rule strings, emitted in order.
    """
    if not buckets:
        raise ValueError("with_media requires at least one bucket")
    rules = (styles,) if isinstance(styles, str) else tuple(styles)
    return StyleBlock(queries=tuple(to_media_query(b) for b in buckets), rules=rules)
