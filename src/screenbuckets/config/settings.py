"""Global breakpoint tables and media query constants.

Each table lists the inclusive minimum of every bucket after the first, in
ascending order. The first bucket of a tier always starts unbounded and the
last one always ends unbounded; all other edges are derived from these
numbers by the catalog.
"""

from __future__ import annotations

from typing import Final, Tuple

# handset2, handset3, portable1, portable2, portable3, wide1, wide2
WIDTH_FINE_BREAKPOINTS: Final[Tuple[int, ...]] = (352, 384, 512, 864, 1024, 1280, 1920)

# medium, tall (same numbers as portable1 / portable2 on the width axis)
HEIGHT_BREAKPOINTS: Final[Tuple[int, ...]] = (512, 864)

MEDIA_TYPE: Final = "screen"
PX_UNIT: Final = "px"
