"""Conway's Game of Life simulation step with edge-clamped neighborhoods."""
import numpy as np
from typing import Tuple

from ..config import GRID_SIZE


def _row_window_sums(cells: np.ndarray) -> np.ndarray:
    """Sum each cell with its left and right neighbors in the same row, without wrapping."""
    padded = np.pad(cells, ((0, 0), (1, 1)))
    return padded[:, :-2] + padded[:, 1:-1] + padded[:, 2:]


def count_neighbors(state: np.ndarray) -> np.ndarray:
    """
    Count live neighbors for each cell using clamped (non-wrapping) windows.

    For cell (i, j) the count is the live cells of row max(0, i-1) and row
    min(rows-1, i+1) over columns [max(0, j-1), min(cols-1, j+1)], plus the
    cells at (i, max(0, j-1)) and (i, min(cols-1, j+1)).

    On the first and last row the clamped row is row i itself, and on the
    first and last column the clamped column is j itself, so edge cells
    include themselves and their row neighbors more than once.
    """
    cells = np.asarray(state).astype(np.int32)
    h, w = cells.shape
    rows = np.arange(h)
    cols = np.arange(w)
    top = np.maximum(rows - 1, 0)
    bottom = np.minimum(rows + 1, h - 1)
    left = np.maximum(cols - 1, 0)
    right = np.minimum(cols + 1, w - 1)

    windows = _row_window_sums(cells)
    return windows[top] + windows[bottom] + cells[:, left] + cells[:, right]


def next_generation(state: np.ndarray) -> np.ndarray:
    """Return a new grid one generation after state. The input is not modified."""
    alive = np.asarray(state, dtype=bool)
    neighbors = count_neighbors(alive)
    survive = alive & ((neighbors == 2) | (neighbors == 3))
    birth = ~alive & (neighbors == 3)
    return survive | birth


class GameOfLife:
    """Game of Life simulator on a fixed-size grid with clamped edges."""

    def __init__(self, grid_size: Tuple[int, int] = GRID_SIZE):
        """Create simulator with the given grid dimensions."""
        self.height, self.width = grid_size

    @property
    def grid_size(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def step(self, state: np.ndarray) -> np.ndarray:
        """Compute the next state for the provided grid."""
        if np.shape(state) != self.grid_size:
            raise ValueError(
                f"Expected grid of shape {self.grid_size}, got {np.shape(state)}"
            )
        return next_generation(state)

    def simulate(self, initial_state: np.ndarray, num_steps: int) -> np.ndarray:
        """Simulate evolution for multiple steps and return the full trajectory."""
        if num_steps < 0:
            raise ValueError(f"num_steps must be non-negative, got {num_steps}")
        trajectory = np.zeros((num_steps + 1, self.height, self.width), dtype=bool)
        trajectory[0] = initial_state
        current_state = trajectory[0].copy()
        for t in range(1, num_steps + 1):
            current_state = self.step(current_state)
            trajectory[t] = current_state
        return trajectory
