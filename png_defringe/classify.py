# png_defringe/classify.py
"""
Transparent / opaque pixel classification.

Any alpha below ALPHA_OPAQUE marks a pixel as transparent (needs recolouring);
only alpha == ALPHA_OPAQUE makes it a valid colour source. There is no partial
state in between.
"""
from __future__ import annotations

import numpy as np

from .constants import ALPHA_OPAQUE
from .core_types import BoolMask, Pixel, RGBA8Grid


def is_transparent(pixel: Pixel) -> bool:
    return int(pixel[3]) < ALPHA_OPAQUE


def transparent_mask(grid: RGBA8Grid) -> BoolMask:
    """Boolean (H,W) mask of pixels for which is_transparent holds."""
    return grid[..., 3] < ALPHA_OPAQUE


def opaque_mask(grid: RGBA8Grid) -> BoolMask:
    return ~transparent_mask(grid)


__all__ = ["is_transparent", "transparent_mask", "opaque_mask"]
