"""Grid helpers: fixed-size boolean cell arrays indexed [row, col]."""
import numpy as np
from typing import Tuple, Optional

from ..config import GRID_SIZE


def new_grid(grid_size: Tuple[int, int] = GRID_SIZE) -> np.ndarray:
    """Return an all-dead grid of the given (rows, cols) size."""
    return np.zeros(grid_size, dtype=bool)


def as_grid(state) -> np.ndarray:
    """Return a new boolean grid built from any 2D array-like of 0/1 values."""
    grid = np.array(state, dtype=bool)
    if grid.ndim != 2:
        raise ValueError(f"Grid must be 2D, got shape {grid.shape}")
    return grid


def place_pattern(grid: np.ndarray,
                  pattern: np.ndarray,
                  position: Optional[Tuple[int, int]] = None) -> np.ndarray:
    """Return a copy of grid with the live cells of pattern set, centered by default or at a given corner."""
    result = as_grid(grid)
    pattern = as_grid(pattern)
    ph, pw = pattern.shape
    h, w = result.shape
    if position is None:
        start_h = (h - ph) // 2
        start_w = (w - pw) // 2
    else:
        start_h, start_w = position

    # Clip both ends; corners above or left of the grid drop leading pattern cells
    dst_h, dst_w = max(0, start_h), max(0, start_w)
    end_h = min(start_h + ph, h)
    end_w = min(start_w + pw, w)
    if end_h <= dst_h or end_w <= dst_w:
        return result

    src_h, src_w = dst_h - start_h, dst_w - start_w
    result[dst_h:end_h, dst_w:end_w] |= \
        pattern[src_h:src_h + end_h - dst_h, src_w:src_w + end_w - dst_w]

    return result


def population(grid: np.ndarray) -> int:
    """Return number of live cells."""
    return int(np.count_nonzero(grid))
