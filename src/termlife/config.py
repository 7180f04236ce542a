"""Reference configuration for the terminal simulator."""

# Grid dimensions (rows, cols)
ROWS = 32
COLS = 64
GRID_SIZE = (ROWS, COLS)

# Seconds between frames
FRAME_INTERVAL = 0.1

ALIVE_GLYPH = 'O'
DEAD_GLYPH = ' '
BORDER_GLYPH = '#'

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
