from __future__ import annotations

import threading

from png_defringe.utils import (
    alpha_summary,
    captured_output,
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
)


def test_formatting():
    assert format_seconds_compact(0.0125) == "12.5ms"
    assert format_seconds_compact(2.5) == "2.500s"
    assert format_seconds_compact(75.0) == "1m 15.0s"
    assert format_total_duration_compact(75.0) == "1m 15s"
    assert key_value_pairs_to_string([("Jobs", 1200), ("Debug", True)]) == "Jobs: 1,200  Debug: on"


def test_alpha_summary(make_grid):
    grid = make_grid(3, 2, fill=(0, 0, 0, 255))
    grid[0, 0, 3] = 0
    grid[1, 2, 3] = 128
    assert alpha_summary(grid) == [
        ("Size", "3x2"),
        ("Opaque", 4),
        ("Transparent", 2),
        ("Alpha=0", 1),
    ]


def test_captured_output_is_per_thread(capsys):
    seen = {}

    def worker():
        with captured_output() as buf:
            log("from worker")
        seen["worker"] = buf.getvalue()

    with captured_output() as main_buf:
        t = threading.Thread(target=worker)
        t.start()
        t.join()
        log("from main")
    log("after")

    assert seen["worker"] == "from worker\n"
    assert main_buf.getvalue() == "from main\n"
    assert capsys.readouterr().out == "after\n"
