# png_defringe/utils.py
from __future__ import annotations

"""
Shared utilities for png_defringe.

Includes time formatting, alpha statistics for reports, and tidy logging.
"""

import io
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Iterable, List, Optional, TextIO, Tuple

import numpy as np

from .classify import transparent_mask
from .core_types import RGBA8Grid


#  Time formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_total_duration_compact(seconds: float) -> str:
    """Compact total duration: 'Mm Ss', 'Ss.s', or 'ms'."""
    if seconds >= 60.0:
        minutes = int(seconds // 60)
        rem = int(round(seconds - 60 * minutes))
        return f"{minutes}m {rem}s"
    if seconds >= 1.0:
        return f"{seconds:.1f}s"
    return f"{seconds * 1000.0:.1f}ms"


# Alpha stats


def alpha_summary(grid: RGBA8Grid) -> List[Tuple[str, Any]]:
    """(name, value) pairs describing the alpha channel, for debug lines."""
    h, w = int(grid.shape[0]), int(grid.shape[1])
    transparent = transparent_mask(grid)
    n_transparent = int(np.count_nonzero(transparent))
    n_zero = int(np.count_nonzero(grid[..., 3] == 0))
    return [
        ("Size", f"{w}x{h}"),
        ("Opaque", h * w - n_transparent),
        ("Transparent", n_transparent),
        ("Alpha=0", n_zero),
    ]


#  CLI logging


def enable_line_buffered_stdout() -> None:
    """
    Enable line-buffered stdout when supported.
    Helps live progress printing in terminals that expose .reconfigure().
    """
    import sys

    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (AttributeError, OSError, ValueError):
            pass


# Pretty logging

_capture = threading.local()


def _out() -> Optional[TextIO]:
    """Current thread's capture buffer, or None for sys.stdout."""
    return getattr(_capture, "buffer", None)


@contextmanager
def captured_output() -> Iterator[io.StringIO]:
    """
    Collect this thread's log lines in a StringIO instead of stdout.
    Other threads keep printing normally, unlike contextlib.redirect_stdout.
    """
    previous = _out()
    buf = io.StringIO()
    _capture.buffer = buf
    try:
        yield buf
    finally:
        _capture.buffer = previous


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1_234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        text = f"{value:.3f}".rstrip("0").rstrip(".")
        return text
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    Format (name, value) pairs as 'Name: value' blocks separated by sep.
    Uses format_bool_on_off / format_number_compact for readability.
    """
    out: List[str] = []
    for name, value in pairs:
        display = (
            format_bool_on_off(value)
            if isinstance(value, bool)
            else format_number_compact(value)
        )
        out.append(f"{name}{eq}{display}")
    return sep.join(out)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [run] CPU cores: 8  Jobs: 2  Action: match
    Routes to debug_log() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", file=_out(), flush=True)


def log(message: str) -> None:
    """Plain log line."""
    print(message, file=_out(), flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", file=_out(), flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", file=_out(), flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    import sys

    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_total_duration_compact",
    "alpha_summary",
    "enable_line_buffered_stdout",
    "captured_output",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
