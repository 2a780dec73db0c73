"""Action selection, Pillow round trips and the command line."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from png_defringe import defringe, select_recolorer
from png_defringe.cli import default_output_path, list_input_images, main
from png_defringe.image_io import is_image_file, load_image_rgba, save_image_rgba
from png_defringe.recolor import recolor_average, recolor_interpolated, recolor_uniform


def _write_png(path, grid):
    Image.fromarray(grid).save(path)
    return path


@pytest.fixture
def fringed(make_grid):
    grid = make_grid(3, 3, fill=(100, 150, 200, 255))
    grid[1, 1] = (255, 0, 255, 0)
    return grid


# actions


@pytest.mark.parametrize(
    "name, fn",
    [("black", recolor_uniform), ("avg", recolor_average), ("match", recolor_interpolated)],
)
def test_select_recolorer(name, fn):
    assert select_recolorer(name) is fn


def test_select_recolorer_unknown():
    with pytest.raises(ValueError, match="unknown action"):
        select_recolorer("blur")


def test_defringe_dispatches(fringed):
    assert defringe(fringed, "match") == 1
    assert tuple(fringed[1, 1]) == (100, 150, 200, 0)


# image I/O


def test_save_load_round_trip(tmp_path, random_grid):
    written = save_image_rgba(tmp_path / "out.png", random_grid)
    assert written == tmp_path / "out.png"
    np.testing.assert_array_equal(load_image_rgba(written), random_grid)


def test_save_forces_png_suffix(tmp_path, fringed):
    written = save_image_rgba(tmp_path / "sub" / "out.jpg", fringed)
    assert written == tmp_path / "sub" / "out.png"
    assert written.exists()


def test_load_converts_rgb_to_opaque_rgba(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (2, 2), (1, 2, 3)).save(path)
    grid = load_image_rgba(path)
    assert grid.shape == (2, 2, 4)
    assert np.all(grid[..., 3] == 255)
    grid[0, 0] = 0  # writable


def test_is_image_file(tmp_path, fringed):
    text = tmp_path / "notes.png"
    text.write_text("not an image")
    assert not is_image_file(text)
    assert is_image_file(_write_png(tmp_path / "ok.png", fringed))


# CLI


def test_cli_single_file(tmp_path, fringed, capsys):
    src = _write_png(tmp_path / "sprite.png", fringed)
    dst = tmp_path / "clean.png"

    main(["match", str(src), str(dst)])

    out = load_image_rgba(dst)
    assert tuple(out[1, 1]) == (100, 150, 200, 0)
    stdout = capsys.readouterr().out
    assert "Passes: 1" in stdout
    assert "Finished successfully." in stdout


def test_cli_default_output_name(tmp_path, fringed):
    src = _write_png(tmp_path / "sprite.png", fringed)

    main(["black", str(src)])

    out = load_image_rgba(tmp_path / "sprite_defringed.png")
    assert tuple(out[1, 1]) == (0, 0, 0, 0)


def test_cli_missing_input_exits_2(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["avg", str(tmp_path / "missing.png")])
    assert exc_info.value.code == 2


def test_cli_unknown_action_is_usage_error(tmp_path, fringed):
    src = _write_png(tmp_path / "sprite.png", fringed)
    with pytest.raises(SystemExit) as exc_info:
        main(["blur", str(src)])
    assert exc_info.value.code == 2


def test_cli_avg_without_opaque_pixels_fails(tmp_path, make_grid, capsys):
    src = _write_png(tmp_path / "empty.png", make_grid(2, 2, fill=(5, 5, 5, 0)))

    with pytest.raises(SystemExit) as exc_info:
        main(["avg", str(src)])

    assert exc_info.value.code == 1
    assert "no opaque pixels" in capsys.readouterr().err
    assert not (tmp_path / "empty_defringed.png").exists()


@pytest.mark.parametrize("jobs", ["1", "2"])
def test_cli_folder(tmp_path, fringed, jobs, capsys):
    src_dir = tmp_path / "in"
    src_dir.mkdir()
    _write_png(src_dir / "a.png", fringed)
    _write_png(src_dir / "b.png", fringed)
    _write_png(src_dir / "a_defringed.png", fringed)
    (src_dir / "readme.txt").write_text("skip me")
    out_dir = tmp_path / "out"

    main(["avg", str(src_dir), "--outdir", str(out_dir), "--jobs", jobs])

    assert sorted(p.name for p in out_dir.iterdir()) == ["a_defringed.png", "b_defringed.png"]
    assert tuple(load_image_rgba(out_dir / "b_defringed.png")[1, 1]) == (100, 150, 200, 0)
    stdout = capsys.readouterr().out
    assert stdout.index("=== a.png ===") < stdout.index("=== b.png ===")
    assert "Finished 2/2 file(s)" in stdout


def test_cli_folder_rejects_single_output(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["match", str(tmp_path), str(tmp_path / "x.png")])
    assert exc_info.value.code == 2


def test_path_helpers(tmp_path):
    assert default_output_path(tmp_path / "a.webp", None) == tmp_path / "a_defringed.png"
    assert default_output_path(tmp_path / "a.png", tmp_path / "o") == tmp_path / "o" / "a_defringed.png"
    (tmp_path / "B.PNG").write_bytes(b"")
    (tmp_path / "a.png").write_bytes(b"")
    assert [p.name for p in list_input_images(tmp_path)] == ["a.png", "B.PNG"]
