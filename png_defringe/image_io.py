# png_defringe/image_io.py
from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .core_types import RGBA8Grid, assert_rgba8_grid

"""
Image I/O helpers: decode any Pillow-readable image to a writable RGBA8 grid
and encode a grid back to PNG.
"""


def load_image_rgba(path: Path) -> RGBA8Grid:
    """Load an image with Pillow, convert to RGBA, return a writable (H,W,4) copy."""
    with Image.open(path) as im0:
        im = im0.convert("RGBA")
    grid = np.array(im, dtype=np.uint8)
    return assert_rgba8_grid(grid)


def save_image_rgba(path: Path, grid: RGBA8Grid) -> Path:
    """Save grid as PNG; a non-.png suffix is replaced. Returns the written path."""
    assert_rgba8_grid(grid)
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(grid)).save(path, format="PNG")
    return path


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


__all__ = [
    "load_image_rgba",
    "save_image_rgba",
    "is_image_file",
]
