"""Screen bucket design package.

Contains the bucket model, the named bucket catalog, viewport metrics and the
CSS media query projection.
"""

from .buckets import (  # noqa: F401
    Axis,
    Boundary,
    Bucket,
    BucketDefinitionError,
    UNBOUNDED,
    create,
    encompass,
    step_below,
    in_bucket,
    is_in,
    to_value_bucket,
)
from .metrics import Metrics  # noqa: F401
from .catalog import (  # noqa: F401
    CatalogIntegrityError,
    HeightClass,
    ScreenClass,
    WidthBroad,
    WidthFine,
    classify,
    classify_height,
    classify_width,
    classify_width_fine,
    get_bucket,
    list_buckets,
    validate_catalog,
)
from .media_query import (  # noqa: F401
    MediaFeature,
    MediaQuery,
    StyleBlock,
    to_media_query,
    with_media,
)
