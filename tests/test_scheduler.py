import logging
import threading
from datetime import timedelta

import pytest

from busylight.scheduler import every


class _Counter:
    """Callable that counts its calls and sets ``stop`` after ``limit`` of them."""

    def __init__(self, stop=None, limit=None):
        self.count = 0
        self.stop = stop
        self.limit = limit

    def __call__(self):
        self.count += 1
        if self.stop is not None and self.count == self.limit:
            self.stop.set()


def test_preset_stop_never_calls():
    stop = threading.Event()
    stop.set()
    counter = _Counter()
    every(0.01, counter, stop)
    assert counter.count == 0


def test_runs_until_stopped():
    stop = threading.Event()
    counter = _Counter(stop, limit=3)
    every(0.005, counter, stop)
    assert counter.count == 3


def test_accepts_timedelta():
    stop = threading.Event()
    counter = _Counter(stop, limit=1)
    every(timedelta(milliseconds=5), counter, stop)
    assert counter.count == 1


def test_stop_from_other_thread():
    stop = threading.Event()
    counter = _Counter()
    timer = threading.Timer(0.05, stop.set)
    timer.start()
    every(0.005, counter, stop)
    timer.join()
    assert counter.count >= 1


@pytest.mark.parametrize("tick", [0, -1, timedelta(0)])
def test_non_positive_tick_raises(tick):
    with pytest.raises(ValueError):
        every(tick, lambda: None, threading.Event())


def test_stopping_is_logged(caplog):
    stop = threading.Event()
    stop.set()
    with caplog.at_level(logging.ERROR, logger="busylight.scheduler"):
        every(0.01, lambda: None, stop)
    assert any("stopped" in record.getMessage() for record in caplog.records)