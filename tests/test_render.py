import io

from termlife.core import new_grid, seed_grid
from termlife.terminal import render, render_frame


def test_frame_dimensions_and_border():
    frame = render_frame(seed_grid((32, 64)))
    lines = frame.splitlines()
    assert len(lines) == 34
    assert all(len(line) == 66 for line in lines)
    assert set(lines[0]) == {'#'}
    assert set(lines[-1]) == {'#'}
    assert all(line[0] == '#' and line[-1] == '#' for line in lines)


def test_frame_cell_glyphs():
    grid = new_grid((2, 3))
    grid[0, 1] = True
    grid[1, 2] = True
    assert render_frame(grid) == "#####\n# O #\n#  O#\n#####\n"


def test_frame_custom_glyphs():
    grid = new_grid((1, 2))
    grid[0, 0] = True
    assert render_frame(grid, alive='*', dead='.', border='+') == "++++\n+*.+\n++++\n"


def test_render_writes_to_stream():
    stream = io.StringIO()
    render(new_grid((3, 4)), stream)
    assert stream.getvalue() == render_frame(new_grid((3, 4)))
