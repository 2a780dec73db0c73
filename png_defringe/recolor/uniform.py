# png_defringe/recolor/uniform.py
from __future__ import annotations

import numpy as np

from ..classify import transparent_mask
from ..constants import BLACK_TRANSPARENT
from ..core_types import RGBA8Grid, assert_rgba8_grid
from ..utils import debug_log


def recolor_uniform(grid: RGBA8Grid, *, debug: bool = False) -> int:
    """
    Overwrite every transparent pixel with (0, 0, 0, 0), in place.

    Original alpha is not kept. Opaque pixels are untouched, so a second call
    is a no-op. Returns the number of pixels written.
    """
    assert_rgba8_grid(grid)
    mask = transparent_mask(grid)
    grid[mask] = np.asarray(BLACK_TRANSPARENT, dtype=np.uint8)
    n = int(np.count_nonzero(mask))
    if debug:
        debug_log(f"black: recoloured={n:,}")
    return n


__all__ = ["recolor_uniform"]
