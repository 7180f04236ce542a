import sys

from termlife import __main__ as entry
from termlife.terminal import DEFAULT_CLEAR_COMMANDS, LifeRunner


class InterruptedRunner:
    instances = []

    def __init__(self, clearer=None, **kwargs):
        self.clearer = clearer
        InterruptedRunner.instances.append(self)

    def run(self, stop_signal=None, max_generations=None):
        raise KeyboardInterrupt


def test_keyboard_interrupt_exits_cleanly(monkeypatch, capsys):
    def interrupted(self, stop_signal=None, max_generations=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(LifeRunner, 'run', interrupted)
    assert entry.main() == 0
    assert capsys.readouterr().out.endswith("\n")


def test_main_wires_clearer_and_logging(monkeypatch):
    logging_calls = []
    monkeypatch.setattr(entry.logging, 'basicConfig', lambda **kwargs: logging_calls.append(kwargs))
    monkeypatch.setattr(entry, 'LifeRunner', InterruptedRunner)
    InterruptedRunner.instances.clear()

    assert entry.main() == 0

    assert logging_calls[0]['stream'] is sys.stderr
    clearer = InterruptedRunner.instances[0].clearer
    assert clearer.commands == DEFAULT_CLEAR_COMMANDS
