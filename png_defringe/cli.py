#!/usr/bin/env python3
"""
png_defringe/cli.py
Recolour the transparent pixels of RGBA images to remove colour fringing.

Usage:
  png-defringe ACTION INPUT [OUTPUT] --outdir DIR --jobs N --debug

Actions:
  black : transparent pixels go towards black (alpha set to 0).
  avg   : transparent pixels go towards the average of all opaque pixels (alpha set to 0).
  match : transparent pixels are interpolated to match their nearest neighbours (alpha kept).

Input:
  Any Pillow-readable image, or a folder of them. A pixel is transparent when
  its alpha is below 255.

Output:
  PNG. If OUTPUT is omitted, writes <stem>_defringed.png next to INPUT (or in --outdir).
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from PIL import UnidentifiedImageError

from .action import ACTIONS, defringe
from .constants import IMAGE_EXTS, OUTPUT_SUFFIX
from .errors import DefringeError
from .image_io import load_image_rgba, save_image_rgba
from .utils import (
    alpha_summary,
    captured_output,
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)

# CLI args


def build_parser() -> argparse.ArgumentParser:
    actions_help = "\n".join(f"  {name:<6} {text}" for name, text in ACTIONS)
    parser = argparse.ArgumentParser(
        prog="png-defringe",
        description="Recolour transparent pixels so they stop bleeding colour halos.",
        epilog=f"actions:\n{actions_help}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "action", choices=[name for name, _text in ACTIONS], help="Recolouring strategy"
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="Output file (single input only). Defaults to <stem>_defringed.png",
    )
    parser.add_argument(
        "--outdir", type=Path, default=None, help="Output directory (optional)"
    )
    parser.add_argument(
        "--jobs", type=int, default=1, help="Files processed in parallel (folders)"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose per-pass details")
    return parser


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        action: "black" | "avg" | "match"
        src: Path to image or folder
        output: optional Path for a single output file
        outdir: optional Path for outputs
        jobs: parallel file workers
        debug: bool for per-pass details
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.jobs < 1:
        parser.error("--jobs must be >= 1")
    if args.output is not None and args.src.is_dir():
        parser.error("OUTPUT applies to a single input file; use --outdir for folders")
    return args


def default_output_path(src_path: Path, outdir: Optional[Path]) -> Path:
    parent = outdir if outdir is not None else src_path.parent
    return parent / f"{src_path.stem}{OUTPUT_SUFFIX}.png"


def list_input_images(folder: Path) -> List[Path]:
    """Images in folder with a known extension, skipping earlier outputs."""
    files = [
        p
        for p in folder.iterdir()
        if p.is_file()
        and p.suffix.lower() in IMAGE_EXTS
        and not p.stem.endswith(OUTPUT_SUFFIX)
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Per-file processing


def _process_single_image(
    src_path: Path, out_path: Path, action: str, debug: bool
) -> Path:
    """
    Process a single image path end-to-end:
      load -> recolour -> save -> report.
    """
    t_start = time.perf_counter()
    print_banner(src_path.name)

    grid = load_image_rgba(src_path)
    if debug:
        debug_log(key_value_pairs_to_string(alpha_summary(grid)))
    t_loaded = time.perf_counter()

    result = defringe(grid, action, debug=debug)
    t_recoloured = time.perf_counter()

    if out_path.suffix.lower() != ".png":
        warn(f"{out_path.name}: output is written as PNG to keep alpha")
    written = save_image_rgba(out_path, grid)
    t_saved = time.perf_counter()

    log(f"Action: {action}")
    if action == "match":
        log(f"Passes: {result:,}")
    else:
        log(f"Recoloured pixels: {result:,}")
    log(f"Wrote {written.name}")

    if debug:
        debug_log(
            f"Total {format_total_duration_compact(t_saved - t_start)}  "
            f"(load={format_seconds_compact(t_loaded - t_start)}, "
            f"recolour={format_seconds_compact(t_recoloured - t_loaded)}, "
            f"save={format_seconds_compact(t_saved - t_recoloured)})"
        )
    else:
        log(f"Total time {format_total_duration_compact(t_saved - t_start)}")
    return written


def _process_one_live(
    src_path: Path, out_path: Path, action: str, debug: bool
) -> bool:
    """Process a single file and stream logs to stdout. Returns success."""
    try:
        _process_single_image(src_path, out_path, action, debug)
    except (DefringeError, UnidentifiedImageError, OSError) as e:
        error(f"{src_path.name}: {e}")
        return False
    return True


def _process_one_captured(
    src_path: Path, out_path: Path, action: str, debug: bool
) -> Tuple[str, bool]:
    """
    Process a single file with stdout capture.

    Useful for concurrent execution where output should be printed in order.
    """
    with captured_output() as buf:
        ok = _process_one_live(src_path, out_path, action, debug)
    return buf.getvalue(), ok


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    CLI entry point.

    Handles single file or folder. In folder mode supports --jobs parallelism
    (one image per worker) while preserving readable output ordering.
    Exits 2 when INPUT does not exist, 1 when any file failed.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    print_config_line(
        "run",
        [("Action", args.action), ("CPU cores", os.cpu_count() or 1), ("Jobs", args.jobs)],
        debug=False,
    )

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        sys.exit(2)

    if src.is_dir():
        files = list_input_images(src)
        if args.debug:
            debug_log(
                key_value_pairs_to_string([("Images", len(files)), ("Jobs", args.jobs)])
            )
        jobs = [(p, default_output_path(p, args.outdir)) for p in files]

        if args.jobs == 1:
            results = [
                _process_one_live(p, dst, args.action, args.debug) for p, dst in jobs
            ]
        else:
            with ThreadPoolExecutor(max_workers=args.jobs) as ex:
                futures = [
                    ex.submit(_process_one_captured, p, dst, args.action, args.debug)
                    for p, dst in jobs
                ]
                captured = [f.result() for f in futures]
            print("".join(text for text, _ok in captured), end="", flush=True)
            results = [ok for _text, ok in captured]

        n_ok = sum(1 for ok in results if ok)
        log(f"\nFinished {n_ok}/{len(results)} file(s)")
        if n_ok != len(results):
            sys.exit(1)
        return

    out_path = args.output or default_output_path(src, args.outdir)
    if not _process_one_live(src, out_path, args.action, args.debug):
        sys.exit(1)
    log("Finished successfully.")


if __name__ == "__main__":
    main()
