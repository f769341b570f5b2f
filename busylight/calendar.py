"""Calendar events and a calendar that refreshes itself from an event source."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Event:
    """A time span taken by a calendar entry."""

    start: datetime | None = None
    end: datetime | None = None

    def is_valid(self) -> bool:
        """Return True if both ends are set and the event ends after it starts."""
        return self.start is not None and self.end is not None and self.end > self.start


@runtime_checkable
class EventSource(Protocol):
    """Anything that can supply a list of calendar events."""

    def events(self) -> list[Event]:
        """Return the current list of events, raising on failure."""
        ...


class Calendar:
    """Holds the events last fetched from an event source."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def sync(self, source: EventSource) -> None:
        """Replace the stored events with those from ``source``.

        If the source raises, the stored events are left untouched.
        """
        self.events = list(source.events())