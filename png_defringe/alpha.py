# png_defringe/alpha.py
from __future__ import annotations

"""
Alpha snapshot / restore used around recolouring passes that borrow the alpha
channel as working state.
"""

import numpy as np

from .core_types import RGBA8Grid, U8Mask


def snapshot_alpha(grid: RGBA8Grid) -> U8Mask:
    """Copy of the (H,W) alpha channel, detached from the grid."""
    return grid[..., 3].copy()


def restore_alpha(grid: RGBA8Grid, snapshot: U8Mask) -> None:
    """Write snapshot back into the alpha channel verbatim."""
    if snapshot.shape != grid.shape[:2]:
        raise ValueError(
            f"alpha snapshot {tuple(snapshot.shape)} does not match grid {tuple(grid.shape[:2])}"
        )
    np.copyto(grid[..., 3], snapshot)


__all__ = ["snapshot_alpha", "restore_alpha"]
