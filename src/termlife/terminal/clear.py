"""Platform-specific terminal clearing."""
import logging
import platform
import subprocess
from typing import Callable, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


DEFAULT_CLEAR_COMMANDS = {
    'linux': ('clear',),
    'darwin': ('clear',),
    'windows': ('cmd', '/c', 'cls'),
}


class TerminalClearError(Exception):
    """Base class for terminal clearing failures."""


class UnsupportedPlatformError(TerminalClearError):
    """No clear command is registered for the platform."""

    def __init__(self, platform_name: str):
        self.platform = platform_name
        super().__init__(
            f"terminal clearing is not supported for your platform {platform_name}"
        )


class ExternalCommandError(TerminalClearError):
    """The clear command could not be started or exited abnormally."""

    def __init__(self, command: Sequence[str], returncode: Optional[int] = None,
                 reason: Optional[str] = None):
        self.command = tuple(command)
        self.returncode = returncode
        detail = reason if reason is not None else f"exit status {returncode}"
        super().__init__(f"clear command {' '.join(self.command)!r} failed: {detail}")


def current_platform() -> str:
    """Return the host OS identifier, e.g. 'linux', 'darwin' or 'windows'."""
    return platform.system().lower()


class TerminalClearer:
    """Runs the clear command registered for one platform."""

    def __init__(self,
                 commands: Mapping[str, Sequence[str]],
                 platform_name: Optional[str] = None,
                 runner: Callable = subprocess.run):
        self.commands = dict(commands)
        self.platform = platform_name if platform_name is not None else current_platform()
        self.runner = runner

    @property
    def is_supported(self) -> bool:
        return self.platform in self.commands

    def clear(self) -> None:
        """Clear the terminal, raising a TerminalClearError on failure."""
        command = self.commands.get(self.platform)
        if command is None:
            raise UnsupportedPlatformError(self.platform)

        try:
            # Inherits stdout so the escape sequence reaches the terminal
            result = self.runner(list(command), check=False)
        except OSError as e:
            raise ExternalCommandError(command, reason=str(e)) from e

        if result.returncode != 0:
            raise ExternalCommandError(command, returncode=result.returncode)
        logger.debug("Cleared terminal with %s", command)
