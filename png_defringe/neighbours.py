# png_defringe/neighbours.py
from __future__ import annotations

"""
8-connected neighbourhood helpers.

Exports:
- NEIGHBOUR_OFFSETS: the 8 (dx, dy) steps around a cell
- neighbour_coords(x, y, width, height) -> clipped list of (x, y)
- NeighbourAccumulator: reusable buffers for per-cell neighbour sums
- neighbour_sums(rgb, sources) -> (sums, counts) one-shot convenience

Notes:
- Cells outside the grid are simply absent: edge cells see 5 neighbours,
  corner cells 3.
- Sums are uint16 (8 * 255 fits) and counts uint8 (at most 8).
"""

from typing import List, Tuple

import numpy as np

from .core_types import BoolMask

NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


def neighbour_coords(x: int, y: int, width: int, height: int) -> List[Tuple[int, int]]:
    """Coordinates of the up-to-8 cells around (x, y), clipped to the grid."""
    return [
        (x + dx, y + dy)
        for dx, dy in NEIGHBOUR_OFFSETS
        if 0 <= x + dx < width and 0 <= y + dy < height
    ]


class NeighbourAccumulator:
    """
    Per-cell sum of source RGB and count of sources over the 8-neighbourhood.

    All buffers are allocated once for a (height, width) grid and reused by
    every call to accumulate(); the zero border of the padded buffers stands
    in for cells outside the grid.
    """

    def __init__(self, height: int, width: int) -> None:
        self.height = int(height)
        self.width = int(width)
        self._pad_rgb = np.zeros((self.height + 2, self.width + 2, 3), dtype=np.uint8)
        self._pad_src = np.zeros((self.height + 2, self.width + 2), dtype=np.uint8)
        self.sums = np.zeros((self.height, self.width, 3), dtype=np.uint16)
        self.counts = np.zeros((self.height, self.width), dtype=np.uint8)

    def accumulate(
        self, rgb: np.ndarray, sources: BoolMask
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Fill and return (sums, counts) for the given (H,W,3) rgb and (H,W)
        source mask. The returned arrays are the accumulator's own buffers
        and are overwritten by the next call.
        """
        if rgb.shape[:2] != (self.height, self.width) or sources.shape != (
            self.height,
            self.width,
        ):
            raise ValueError(
                f"expected ({self.height},{self.width}) input, got {tuple(rgb.shape[:2])}"
            )

        H, W = self.height, self.width
        inner_rgb = self._pad_rgb[1 : H + 1, 1 : W + 1]
        inner_rgb[...] = rgb
        inner_rgb[~sources] = 0
        self._pad_src[1 : H + 1, 1 : W + 1] = sources

        self.sums.fill(0)
        self.counts.fill(0)
        for dx, dy in NEIGHBOUR_OFFSETS:
            self.sums += self._pad_rgb[1 + dy : H + 1 + dy, 1 + dx : W + 1 + dx]
            self.counts += self._pad_src[1 + dy : H + 1 + dy, 1 + dx : W + 1 + dx]
        return self.sums, self.counts


def neighbour_sums(rgb: np.ndarray, sources: BoolMask) -> Tuple[np.ndarray, np.ndarray]:
    """One-shot NeighbourAccumulator call; returns fresh (sums, counts)."""
    acc = NeighbourAccumulator(rgb.shape[0], rgb.shape[1])
    return acc.accumulate(rgb, sources)


__all__ = [
    "NEIGHBOUR_OFFSETS",
    "neighbour_coords",
    "NeighbourAccumulator",
    "neighbour_sums",
]
