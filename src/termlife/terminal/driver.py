"""Frame loop: clear, step, render, sleep."""
import logging
import threading
import time
import numpy as np
from typing import Callable, Optional, TextIO

from ..config import FRAME_INTERVAL
from ..core.simulation import GameOfLife
from ..core.patterns import seed_grid
from .clear import (
    DEFAULT_CLEAR_COMMANDS,
    ExternalCommandError,
    TerminalClearer,
    UnsupportedPlatformError,
)
from .render import render

logger = logging.getLogger(__name__)


class LifeRunner:
    """
    Owns the current generation and drives it to the terminal.

    Clear failures never stop the loop: an unsupported platform is reported
    once and clearing is skipped from then on, while a failing clear command
    is reported every time it happens.
    """

    def __init__(self,
                 game: Optional[GameOfLife] = None,
                 clearer: Optional[TerminalClearer] = None,
                 stream: Optional[TextIO] = None,
                 interval: float = FRAME_INTERVAL,
                 sleep: Callable[[float], None] = time.sleep):
        self.game = game if game is not None else GameOfLife()
        self.clearer = clearer if clearer is not None else TerminalClearer(DEFAULT_CLEAR_COMMANDS)
        self.stream = stream
        self.interval = interval
        self.sleep = sleep
        self.state = seed_grid(self.game.grid_size)
        self.generation = 0
        self._clearing_enabled = True

    def _clear(self) -> None:
        if not self._clearing_enabled:
            return
        try:
            self.clearer.clear()
        except UnsupportedPlatformError as e:
            logger.error("%s; continuing without clearing", e)
            self._clearing_enabled = False
        except ExternalCommandError as e:
            logger.warning("%s", e)

    def tick(self) -> np.ndarray:
        """Run one frame and return the new generation."""
        self._clear()
        self.state = self.game.step(self.state)
        self.generation += 1
        render(self.state, self.stream)
        return self.state

    def run(self,
            stop_signal: Optional[threading.Event] = None,
            max_generations: Optional[int] = None) -> int:
        """Loop until stop_signal is set or max_generations frames ran; forever if neither is given."""
        frames = 0
        logger.info("Starting simulation on a %dx%d grid", self.game.height, self.game.width)
        while max_generations is None or frames < max_generations:
            if stop_signal is not None and stop_signal.is_set():
                break
            self.tick()
            frames += 1
            self.sleep(self.interval)
        logger.info("Stopped after %d generations", frames)
        return frames
