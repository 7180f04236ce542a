"""ASCII frame rendering."""
import sys
import numpy as np
from typing import Optional, TextIO

from ..config import ALIVE_GLYPH, DEAD_GLYPH, BORDER_GLYPH


def render_frame(state: np.ndarray,
                 alive: str = ALIVE_GLYPH,
                 dead: str = DEAD_GLYPH,
                 border: str = BORDER_GLYPH) -> str:
    """
    Render a grid as bordered ASCII text.

    Args:
        state: Grid array (H x W)
        alive: Glyph for live cells
        dead: Glyph for dead cells
        border: Glyph for the frame around the grid

    Returns:
        H + 2 newline-terminated lines, each W + 2 characters wide
    """
    cells = np.asarray(state, dtype=bool)
    edge = border * (cells.shape[1] + 2)
    lines = [edge]
    for row in cells:
        lines.append(border + ''.join(alive if cell else dead for cell in row) + border)
    lines.append(edge)
    return '\n'.join(lines) + '\n'


def render(state: np.ndarray, stream: Optional[TextIO] = None, **glyphs) -> None:
    """Write one frame to stream (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    stream.write(render_frame(state, **glyphs))
    stream.flush()
