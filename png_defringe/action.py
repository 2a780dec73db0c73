# png_defringe/action.py
from __future__ import annotations
from typing import Dict, Literal, Tuple

from .core_types import RGBA8Grid, Recolorer
from .recolor import recolor_average, recolor_interpolated, recolor_uniform

"""
Action selection.

Exports:
- Action: the accepted action names
- ACTIONS: (name, help) pairs in display order
- select_recolorer(action) -> recolourer callable
- defringe(grid, action, *, debug=False) -> int
"""


Action = Literal["black", "avg", "match"]

ACTIONS: Tuple[Tuple[str, str], ...] = (
    ("black", "transparent pixels go towards black"),
    ("avg", "transparent pixels go towards the average of all opaque pixels"),
    (
        "match",
        "transparent pixels are interpolated to match their nearest neighbours",
    ),
)

_RECOLORERS: Dict[str, Recolorer] = {
    "black": recolor_uniform,
    "avg": recolor_average,
    "match": recolor_interpolated,
}


def select_recolorer(action: str) -> Recolorer:
    """Map an action name to its recolourer; ValueError on unknown names."""
    try:
        return _RECOLORERS[action]
    except KeyError:
        names = ", ".join(name for name, _help in ACTIONS)
        raise ValueError(f"unknown action {action!r} (expected one of: {names})") from None


def defringe(grid: RGBA8Grid, action: str, *, debug: bool = False) -> int:
    """Apply the selected recolourer to grid in place and return its result."""
    return select_recolorer(action)(grid, debug=debug)


__all__ = ["Action", "ACTIONS", "select_recolorer", "defringe"]
