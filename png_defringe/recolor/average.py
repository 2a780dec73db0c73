# png_defringe/recolor/average.py
from __future__ import annotations

"""
Average-mode recolourer.

The mean colour of all opaque pixels is computed once, then copied onto every
transparent pixel with alpha AVERAGE_ALPHA. The mean is fully computed before
any write, so a NoOpaquePixels failure leaves the grid untouched.
"""

import numpy as np

from ..classify import opaque_mask, transparent_mask
from ..constants import AVERAGE_ALPHA
from ..core_types import RGBA8Grid, RGBATuple, assert_rgba8_grid, rgba_to_hex
from ..errors import NoOpaquePixels
from ..utils import debug_log


def average_opaque_colour(grid: RGBA8Grid) -> RGBATuple:
    """Truncated integer mean of R, G, B over opaque pixels, alpha AVERAGE_ALPHA."""
    opaque = opaque_mask(grid)
    count = int(np.count_nonzero(opaque))
    if count == 0:
        raise NoOpaquePixels(grid.shape)
    totals = grid[opaque, :3].astype(np.int64).sum(axis=0)
    r, g, b = (int(t) // count for t in totals.tolist())
    return (r, g, b, AVERAGE_ALPHA)


def recolor_average(grid: RGBA8Grid, *, debug: bool = False) -> int:
    """
    Overwrite every transparent pixel with average_opaque_colour(grid), in place.

    Raises NoOpaquePixels (grid unmodified) when no pixel is opaque.
    Returns the number of pixels written.
    """
    assert_rgba8_grid(grid)
    colour = average_opaque_colour(grid)
    transparent = transparent_mask(grid)
    grid[transparent] = np.asarray(colour, dtype=np.uint8)
    n = int(np.count_nonzero(transparent))
    if debug:
        debug_log(f"avg: colour={rgba_to_hex(colour)}  recoloured={n:,}")
    return n


__all__ = ["average_opaque_colour", "recolor_average"]
