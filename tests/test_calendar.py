from datetime import datetime, timedelta, timezone

import pytest

from busylight.calendar import Calendar, Event

T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


class _ListSource:
    def __init__(self, events):
        self._events = events

    def events(self):
        return self._events


class _FailingSource:
    def events(self):
        raise ConnectionError("unreachable")


def test_event_valid_when_end_after_start():
    assert Event(T0, T0 + timedelta(hours=1)).is_valid() is True


@pytest.mark.parametrize(
    "start, end",
    [
        (None, None),
        (T0, None),
        (None, T0),
        (T0, T0),
        (T0 + timedelta(hours=1), T0),
    ],
)
def test_event_invalid(start, end):
    assert Event(start, end).is_valid() is False


def test_new_calendar_is_empty():
    assert Calendar().events == []


def test_sync_replaces_events():
    calendar = Calendar()
    first = [Event(T0, T0 + timedelta(hours=1))]
    second = [Event(T0 + timedelta(days=1), T0 + timedelta(days=1, hours=2))]
    calendar.sync(_ListSource(first))
    assert calendar.events == first
    calendar.sync(_ListSource(second))
    assert calendar.events == second


def test_sync_failure_keeps_previous_events():
    calendar = Calendar()
    events = [Event(T0, T0 + timedelta(minutes=30))]
    calendar.sync(_ListSource(events))
    with pytest.raises(ConnectionError):
        calendar.sync(_FailingSource())
    assert calendar.events == events