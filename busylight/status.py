"""Presence status derived from calendar events, and a tracker of its changes."""

from __future__ import annotations

import queue
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum

from busylight.calendar import Calendar

FOCUS_TIME = timedelta(minutes=10)


class Status(IntEnum):
    """What the user is currently doing."""

    IDLE = 1
    FOCUSED = 2
    BUSY = 3

    @classmethod
    def from_calendar(cls, calendar: Calendar, now: datetime | None = None) -> Status:
        """Work out the status at ``now`` from the calendar's events.

        An event in progress makes the status busy; one starting within the
        focus window makes it focused. When several events match, the last
        matching one in the list decides.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        focus_cutoff = now + FOCUS_TIME
        status = cls.IDLE

        for event in calendar.events:
            if event.start is None or event.end is None:
                continue
            if event.start < now < event.end:
                status = cls.BUSY
            elif now < event.start < focus_cutoff:
                status = cls.FOCUSED

        return status


@dataclass(frozen=True)
class Transition:
    """A change from one status to another; ``from_status`` is None initially."""

    from_status: Status | None
    to_status: Status


class Tracker:
    """Records statuses and reports each change as a transition."""

    def __init__(self) -> None:
        self.current: Status | None = None
        self.transitions: queue.Queue[Transition] = queue.Queue()

    def record(self, status: Status) -> Transition | None:
        """Record ``status``; return and enqueue a transition if it changed."""
        if self.current == status:
            return None
        transition = Transition(self.current, status)
        self.current = status
        self.transitions.put(transition)
        return transition