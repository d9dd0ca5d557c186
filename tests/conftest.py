import os
import sys

import pytest

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game_logic import SnakeConfig


class RecordingRenderer:
    def __init__(self):
        self.cells = {}
        self.calls = []

    def render(self, coord, label):
        self.cells[coord] = label
        self.calls.append((coord, label))


class RecordingScoreboard:
    def __init__(self):
        self.scores = []
        self.records = []

    def set_score(self, score):
        self.scores.append(score)

    def set_record(self, record):
        self.records.append(record)


class ManualScheduler:
    """Collects after() callbacks; tests fire them explicitly."""

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._next_id = 0

    def after(self, ms, func):
        self._next_id += 1
        handle = f"after#{self._next_id}"
        self.pending[handle] = (ms, func)
        return handle

    def after_cancel(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire(self):
        assert len(self.pending) == 1, f"expected one pending tick, got {len(self.pending)}"
        handle, (_ms, func) = self.pending.popitem()
        func()
        return handle


@pytest.fixture
def config():
    return SnakeConfig(grid_size=10, seed=7)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def scoreboard():
    return RecordingScoreboard()


@pytest.fixture
def scheduler():
    return ManualScheduler()
