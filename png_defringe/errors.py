# png_defringe/errors.py
from __future__ import annotations

"""
Exceptions raised by the recolourers.
"""


class DefringeError(Exception):
    """Base class for png_defringe failures."""


class NoOpaquePixels(DefringeError, ValueError):
    """Every pixel is transparent, so the opaque-pixel average is undefined."""

    def __init__(self, shape: tuple) -> None:
        h, w = int(shape[0]), int(shape[1])
        super().__init__(f"no opaque pixels in {w}x{h} image; average undefined")
        self.width = w
        self.height = h


class InvalidGrid(DefringeError, TypeError):
    """Array is not a non-empty uint8 (H,W,4) RGBA grid."""


__all__ = ["DefringeError", "NoOpaquePixels", "InvalidGrid"]
