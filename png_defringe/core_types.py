# png_defringe/core_types.py
from __future__ import annotations

"""
Core type aliases and lightweight helpers.
"""

from typing import Callable, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidGrid

# Basic aliases

RGBATuple = Tuple[int, int, int, int]
HexStr = str

RGBA8Grid = NDArray[np.uint8]  # (H, W, 4)
U8Mask = NDArray[np.uint8]  # (H, W)
BoolMask = NDArray[np.bool_]  # (H, W)

Pixel = Union[Sequence[int], NDArray[np.uint8]]  # (4,) R, G, B, A

# Callable signatures

Recolorer = Callable[..., int]  # (grid, *, debug=False) -> pixels/passes


# Small helpers


def rgba_to_hex(rgba: Sequence[int]) -> HexStr:
    """RGBA to lowercase hex string '#rrggbbaa'."""
    r, g, b, a = (int(v) for v in rgba[:4])
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def assert_rgba8_grid(grid: np.ndarray) -> RGBA8Grid:
    """Validate a non-empty uint8 (H,W,4) grid and return it typed as RGBA8Grid."""
    if not isinstance(grid, np.ndarray):
        raise InvalidGrid(f"expected numpy array, got {type(grid).__name__}")
    if grid.dtype != np.uint8 or grid.ndim != 3 or grid.shape[-1] != 4:
        raise InvalidGrid(
            f"expected uint8 (H,W,4) grid, got {grid.dtype} {tuple(grid.shape)}"
        )
    if grid.shape[0] < 1 or grid.shape[1] < 1:
        raise InvalidGrid(f"grid must be at least 1x1, got {tuple(grid.shape)}")
    return grid  # type: ignore[return-value]


__all__ = [
    "RGBATuple",
    "HexStr",
    "RGBA8Grid",
    "U8Mask",
    "BoolMask",
    "Pixel",
    "Recolorer",
    "rgba_to_hex",
    "assert_rgba8_grid",
]
