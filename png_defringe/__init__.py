# png_defringe/__init__.py
"""
png_defringe package.

Purpose:
  Recolour transparent pixels of RGBA images so stale colour stops bleeding
  into halos. See png_defringe.cli for the command line.

Public API:
  recolor_uniform      : "black" action.
  recolor_average      : "avg" action (raises NoOpaquePixels).
  recolor_interpolated : "match" action.
  defringe             : apply an action by name.
  is_transparent       : the transparent-pixel predicate.
  image_io             : Pillow load/save helpers.
  utils                : shared helpers (formatting, logging).

Quick start:
  from png_defringe import defringe
  from png_defringe.image_io import load_image_rgba, save_image_rgba
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import core_types
from . import image_io
from . import utils
from . import recolor

from .action import ACTIONS, defringe, select_recolorer  # noqa: E402,F401
from .classify import is_transparent, transparent_mask  # noqa: E402,F401
from .errors import DefringeError, InvalidGrid, NoOpaquePixels  # noqa: E402,F401
from .recolor import (  # noqa: E402,F401
    recolor_average,
    recolor_interpolated,
    recolor_uniform,
)

__all__ = [
    "__version__",
    "core_types",
    "image_io",
    "utils",
    "recolor",
    "ACTIONS",
    "defringe",
    "select_recolorer",
    "is_transparent",
    "transparent_mask",
    "DefringeError",
    "InvalidGrid",
    "NoOpaquePixels",
    "recolor_uniform",
    "recolor_average",
    "recolor_interpolated",
]
