import numpy as np
import pytest

from termlife.core import (
    GameOfLife,
    as_grid,
    get_all_patterns,
    get_pattern,
    new_grid,
    place_pattern,
    population,
    seed_grid,
)
from termlife.core.patterns import GLIDER


SEED_CELLS = {
    (9, 9), (9, 10), (9, 11),
    (20, 20), (20, 21), (21, 20), (21, 21),
    (2, 12), (3, 13), (4, 11), (4, 12), (4, 13),
    (2, 17), (3, 18), (4, 16), (4, 17), (4, 18),
}


def test_seed_grid_has_reference_cells():
    grid = seed_grid()
    assert grid.shape == (32, 64)
    assert grid.dtype == bool
    live = {(int(r), int(c)) for r, c in zip(*np.nonzero(grid))}
    assert live == SEED_CELLS
    assert population(grid) == len(SEED_CELLS)


def test_get_pattern_returns_copy():
    glider = get_pattern('glider')
    glider[:] = 0
    assert np.array_equal(get_pattern('glider'), GLIDER)


def test_get_pattern_unknown_name():
    with pytest.raises(ValueError, match="pulsar"):
        get_pattern('pulsar')


def test_place_pattern_centers_by_default():
    grid = place_pattern(new_grid((5, 5)), get_pattern('block'))
    assert grid[1:3, 1:3].all()
    assert population(grid) == 4


def test_place_pattern_clips_and_keeps_input():
    base = new_grid((4, 4))
    grid = place_pattern(base, get_pattern('block'), (3, 3))
    assert population(base) == 0
    assert population(grid) == 1
    assert grid[3, 3]


def test_as_grid_rejects_non_2d():
    with pytest.raises(ValueError):
        as_grid([1, 0, 1])


def test_place_pattern_clips_negative_corner():
    grid = place_pattern(new_grid((4, 4)), get_pattern('block'), (-1, -1))
    assert grid.shape == (4, 4)
    assert population(grid) == 1
    assert grid[0, 0]


def test_place_pattern_centers_pattern_larger_than_grid():
    # LWSS is 4x5, so centering on 3x3 drops its first row and column
    grid = place_pattern(new_grid((3, 3)), get_pattern('lwss'))
    expected = np.zeros((3, 3), dtype=bool)
    expected[2, :] = True
    assert np.array_equal(grid, expected)


def test_place_pattern_entirely_outside():
    grid = place_pattern(new_grid((4, 4)), get_pattern('block'), (-5, 1))
    assert population(grid) == 0


def test_get_all_patterns_returns_copies():
    patterns = get_all_patterns()
    patterns['oscillators_p2']['blinker'][:] = 0
    patterns['still_lifes'].clear()
    assert np.array_equal(get_pattern('blinker'), [[1, 1, 1]])
    assert 'block' in get_all_patterns()['still_lifes']
    assert population(seed_grid()) == len(SEED_CELLS)


def _live_shape(state):
    rows, cols = np.nonzero(state)
    return state[rows.min():rows.max() + 1, cols.min():cols.max() + 1]


@pytest.mark.parametrize("category, period", [
    ('still_lifes', 1),
    ('oscillators_p2', 2),
    ('spaceships', 4),
])
def test_patterns_repeat_with_their_period(category, period):
    gol = GameOfLife((20, 20))
    for name, pattern in get_all_patterns()[category].items():
        start = place_pattern(new_grid((20, 20)), pattern)
        trajectory = gol.simulate(start, period)
        assert np.array_equal(_live_shape(trajectory[-1]), as_grid(pattern)), name
        if period > 1:
            assert not np.array_equal(trajectory[1], start), name
