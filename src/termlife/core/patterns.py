"""Named Game of Life patterns and the starting state of the terminal run."""
import numpy as np
from typing import Dict, Tuple

from ..config import GRID_SIZE
from .grid import new_grid, place_pattern


# Still lifes (period 1)
BLOCK = np.array([
    [1, 1],
    [1, 1]
], dtype=np.uint8)

BEEHIVE = np.array([
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 1, 0]
], dtype=np.uint8)

# Oscillators (period 2)
BLINKER = np.array([[1, 1, 1]], dtype=np.uint8)

TOAD = np.array([
    [0, 1, 1, 1],
    [1, 1, 1, 0]
], dtype=np.uint8)

# Spaceships (period 4)
GLIDER = np.array([
    [0, 1, 0],
    [0, 0, 1],
    [1, 1, 1]
], dtype=np.uint8)

LWSS = np.array([
    [0, 1, 0, 0, 1],
    [1, 0, 0, 0, 0],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 0]
], dtype=np.uint8)


PATTERN_CATEGORIES = {
    'still_lifes': {'block': BLOCK, 'beehive': BEEHIVE},
    'oscillators_p2': {'blinker': BLINKER, 'toad': TOAD},
    'spaceships': {'glider': GLIDER, 'lwss': LWSS},
}

# (pattern name, top-left corner) placed on the starting grid
SEED_PLACEMENTS = [
    ('blinker', (9, 9)),
    ('block', (20, 20)),
    ('glider', (2, 11)),
    ('glider', (2, 16)),
]


def get_pattern(name: str) -> np.ndarray:
    """Look up a pattern by name and return a copy of it."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name].copy()

    available = sorted(name for cat in PATTERN_CATEGORIES.values() for name in cat)
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def get_all_patterns() -> Dict[str, Dict[str, np.ndarray]]:
    """Return copies of every pattern, keyed by category then name."""
    return {
        category: {name: pattern.copy() for name, pattern in patterns.items()}
        for category, patterns in PATTERN_CATEGORIES.items()
    }


def seed_grid(grid_size: Tuple[int, int] = GRID_SIZE) -> np.ndarray:
    """Build the starting state: a blinker, a block and two gliders."""
    grid = new_grid(grid_size)
    for name, position in SEED_PLACEMENTS:
        grid = place_pattern(grid, get_pattern(name), position)
    return grid
