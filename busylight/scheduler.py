"""Run a function periodically until told to stop."""

from __future__ import annotations

import logging
import threading
import time
from datetime import timedelta
from typing import Callable

logger = logging.getLogger(__name__)


def every(tick: float | timedelta, fn: Callable[[], object], stop: threading.Event) -> None:
    """Call ``fn`` once per ``tick`` until ``stop`` is set.

    The first call happens one tick after starting. Ticks missed while ``fn``
    runs long are dropped rather than run back to back.

    Raises:
        ValueError: if ``tick`` is not positive.
    """
    interval = tick.total_seconds() if isinstance(tick, timedelta) else float(tick)
    if interval <= 0:
        raise ValueError("non-positive interval for scheduler")

    next_run = time.monotonic() + interval
    while True:
        if stop.wait(max(0.0, next_run - time.monotonic())):
            logger.error("scheduler stopped")
            return
        fn()
        next_run += interval
        now = time.monotonic()
        if next_run < now:
            missed = int((now - next_run) // interval) + 1
            next_run += missed * interval