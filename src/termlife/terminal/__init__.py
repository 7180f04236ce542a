"""Terminal output: rendering, screen clearing and the frame loop"""

from .render import render, render_frame
from .clear import (
    DEFAULT_CLEAR_COMMANDS,
    TerminalClearer,
    TerminalClearError,
    UnsupportedPlatformError,
    ExternalCommandError,
    current_platform,
)
from .driver import LifeRunner

__all__ = [
    'render',
    'render_frame',
    'DEFAULT_CLEAR_COMMANDS',
    'TerminalClearer',
    'TerminalClearError',
    'UnsupportedPlatformError',
    'ExternalCommandError',
    'current_platform',
    'LifeRunner',
]
