# png_defringe/recolor/__init__.py
"""
Recolouring strategies.

Provides:
  recolor_uniform(grid, *, debug=False) -> int
    "black": transparent pixels become (0, 0, 0, 0).
  recolor_average(grid, *, debug=False) -> int
    "avg": transparent pixels become the mean opaque RGB with alpha 0.
    Raises NoOpaquePixels, grid untouched, when nothing is opaque.
  recolor_interpolated(grid, *, debug=False) -> int
    "match": opaque colours grow into transparent areas ring by ring;
    original alpha restored.

    Args:
      grid  : uint8 [H,W,4], mutated in place
      debug : bool, print per-step stats

    Returns:
      pixels written ("black", "avg") or passes run ("match").
"""

from .average import average_opaque_colour, recolor_average
from .interpolate import recolor_interpolated
from .uniform import recolor_uniform

__all__ = [
    "recolor_uniform",
    "recolor_average",
    "average_opaque_colour",
    "recolor_interpolated",
]
