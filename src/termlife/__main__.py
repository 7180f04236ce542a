"""Run the simulator in the current terminal until interrupted."""
import logging
import sys

from .config import LOG_FORMAT
from .terminal import DEFAULT_CLEAR_COMMANDS, LifeRunner, TerminalClearer


def main() -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
    runner = LifeRunner(clearer=TerminalClearer(DEFAULT_CLEAR_COMMANDS))
    try:
        runner.run()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
