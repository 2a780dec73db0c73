# png_defringe/recolor/interpolate.py
from __future__ import annotations

"""
Match-mode recolourer.

Grows colour from opaque regions into transparent ones, one 8-connected ring
per pass, then restores the original alpha so only RGB changes.

Per pass:
  - the grid is copied into a read buffer allocated once per call; every
    update in the pass reads from it, never from cells written earlier in
    the same pass
  - each transparent cell with at least one opaque neighbour gets the
    truncated mean RGB of those neighbours and working alpha ALPHA_OPAQUE,
    which makes it a source for the next pass
  - cells without an opaque neighbour wait for a later pass

A pixel N rings from the nearest opaque pixel is therefore coloured on pass N.
The loop stops when a pass finds nothing transparent. If a pass finds
transparent cells but no opaque source anywhere (an image with no opaque
pixel at all), the remaining cells are set to black and the loop ends.
"""

import numpy as np

from ..alpha import restore_alpha, snapshot_alpha
from ..classify import transparent_mask
from ..constants import ALPHA_OPAQUE
from ..core_types import RGBA8Grid, assert_rgba8_grid
from ..neighbours import NeighbourAccumulator
from ..utils import debug_log


def recolor_interpolated(grid: RGBA8Grid, *, debug: bool = False) -> int:
    """
    Propagate opaque colours into transparent pixels in place; alpha is
    restored verbatim afterwards. Returns the number of passes that wrote
    pixels.
    """
    assert_rgba8_grid(grid)
    height, width = int(grid.shape[0]), int(grid.shape[1])

    original_alpha = snapshot_alpha(grid)
    read = np.empty_like(grid)
    acc = NeighbourAccumulator(height, width)

    passes = 0
    while True:
        np.copyto(read, grid)
        transparent = transparent_mask(read)
        remaining = int(np.count_nonzero(transparent))
        if remaining == 0:
            break

        sums, counts = acc.accumulate(read[..., :3], ~transparent)
        resolvable = transparent & (counts > 0)
        passes += 1

        if not np.any(resolvable):
            grid[transparent, :3] = 0
            grid[transparent, 3] = ALPHA_OPAQUE
            if debug:
                debug_log(
                    f"match pass {passes}: no opaque source, blacked={remaining:,}"
                )
            break

        n_sources = counts[resolvable].astype(np.uint16)[:, None]
        grid[resolvable, :3] = (sums[resolvable] // n_sources).astype(np.uint8)
        grid[resolvable, 3] = ALPHA_OPAQUE

        if debug:
            resolved = int(np.count_nonzero(resolvable))
            debug_log(
                f"match pass {passes}: resolved={resolved:,}  remaining={remaining - resolved:,}"
            )

    restore_alpha(grid, original_alpha)
    return passes


__all__ = ["recolor_interpolated"]
