"""Grid model, simulation step and pattern library"""

from .grid import new_grid, as_grid, place_pattern, population
from .simulation import GameOfLife, count_neighbors, next_generation
from .patterns import get_pattern, get_all_patterns, seed_grid, PATTERN_CATEGORIES

__all__ = [
    'new_grid',
    'as_grid',
    'place_pattern',
    'population',
    'GameOfLife',
    'count_neighbors',
    'next_generation',
    'get_pattern',
    'get_all_patterns',
    'seed_grid',
    'PATTERN_CATEGORIES',
]
