"""Fixed-size Game of Life rendered to a text terminal."""

from .core import (
    GameOfLife,
    count_neighbors,
    next_generation,
    new_grid,
    place_pattern,
    seed_grid,
)
from .terminal import LifeRunner, TerminalClearer, render_frame

__version__ = '0.1.0'

__all__ = [
    'GameOfLife',
    'count_neighbors',
    'next_generation',
    'new_grid',
    'place_pattern',
    'seed_grid',
    'LifeRunner',
    'TerminalClearer',
    'render_frame',
]
