from __future__ import annotations

import numpy as np
import pytest


def _make_grid(width: int, height: int, fill=(0, 0, 0, 0)) -> np.ndarray:
    grid = np.zeros((height, width, 4), dtype=np.uint8)
    grid[...] = np.asarray(fill, dtype=np.uint8)
    return grid


@pytest.fixture
def make_grid():
    """Factory for uint8 (H,W,4) grids filled with one RGBA value."""
    return _make_grid


@pytest.fixture
def random_grid():
    """10x7 grid with random RGB and a mix of opaque, partial and zero alpha."""
    rng = np.random.default_rng(1234)
    grid = rng.integers(0, 256, size=(7, 10, 4), dtype=np.uint8)
    grid[..., 3] = rng.choice(np.array([0, 40, 254, 255], dtype=np.uint8), size=(7, 10))
    grid[0, 0, 3] = 255
    return grid
