"""screenbuckets public API.

Classifies viewport pixel dimensions into named, contiguous screen buckets
(handset / portable / wide; limited / medium / tall) and renders buckets as
CSS media query conditions.

Prefer namespaced access for less common helpers (``screenbuckets.design``,
``screenbuckets.services``); the names below cover everyday use.
"""

from .design import (  # noqa: F401
    Axis,
    Boundary,
    Bucket,
    BucketDefinitionError,
    CatalogIntegrityError,
    HeightClass,
    Metrics,
    ScreenClass,
    UNBOUNDED,
    WidthBroad,
    WidthFine,
    classify,
    create,
    encompass,
    get_bucket,
    in_bucket,
    is_in,
    list_buckets,
    step_below,
    to_media_query,
    to_value_bucket,
    with_media,
)
from .design import catalog  # noqa: F401
from .services import EventBus, ViewportEvent, ViewportState  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Axis",
    "Boundary",
    "Bucket",
    "BucketDefinitionError",
    "CatalogIntegrityError",
    "EventBus",
    "HeightClass",
    "Metrics",
    "ScreenClass",
    "UNBOUNDED",
    "ViewportEvent",
    "ViewportState",
    "WidthBroad",
    "WidthFine",
    "catalog",
    "classify",
    "create",
    "encompass",
    "get_bucket",
    "in_bucket",
    "is_in",
    "list_buckets",
    "step_below",
    "to_media_query",
    "to_value_bucket",
    "with_media",
]
