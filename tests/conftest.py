import itertools

import pendulum
import pytest

from passforge.utils.random_source import RandomSource
from passforge.utils.storage import KeyValueStore
from passforge.utils.history_store import HistoryStore


class FakeSource(RandomSource):
    """Deterministic index source: replays `values` (mod bound) in a cycle."""

    def __init__(self, values=(0,)):
        self._values = itertools.cycle(values)
        self.calls = []

    def next_index(self, bound: int) -> int:
        self.calls.append(bound)
        return next(self._values) % bound


@pytest.fixture
def fake_source():
    return FakeSource


@pytest.fixture
def kv(tmp_path):
    return KeyValueStore(tmp_path)


@pytest.fixture
def ticking_clock():
    """A clock that advances one second per call."""
    start = pendulum.datetime(2025, 1, 1, tz="UTC")
    ticks = itertools.count()
    return lambda: start.add(seconds=next(ticks))


@pytest.fixture
def history(kv, ticking_clock):
    return HistoryStore(kv, clock=ticking_clock)
