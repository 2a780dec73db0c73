# png_defringe/constants.py
"""
Shared constants and defaults.

- ALPHA_OPAQUE: the only alpha value that counts as opaque
- BLACK_TRANSPARENT: fill used by the "black" action
- OUTPUT_SUFFIX, IMAGE_EXTS: CLI defaults
"""
from __future__ import annotations

from typing import FrozenSet, Tuple

ALPHA_OPAQUE: int = 255

BLACK_TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)

# Alpha written by the "avg" action onto every recoloured pixel.
AVERAGE_ALPHA: int = 0

OUTPUT_SUFFIX: str = "_defringed"

IMAGE_EXTS: FrozenSet[str] = frozenset(
    {".png", ".webp", ".tga", ".tif", ".tiff", ".gif", ".bmp"}
)

__all__ = [
    "ALPHA_OPAQUE",
    "BLACK_TRANSPARENT",
    "AVERAGE_ALPHA",
    "OUTPUT_SUFFIX",
    "IMAGE_EXTS",
]
