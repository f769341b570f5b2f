# busylight

A small library for keeping a light in step with your calendar. The light
should be off while you are free, yellow when a meeting starts within the next
ten minutes, and red while a meeting is under way.

Events are read from an iCalendar (`.ics`) feed. The light itself is anything
you write that has `turn_on`, `turn_off` and `change_color` methods.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The pieces

- `busylight.calendar`
  - `Event(start, end)` is a frozen dataclass. `is_valid()` is true when both
    ends are set and `end` is after `start`.
  - `EventSource` is a protocol with one method, `events()`, that returns a
    list of `Event`.
  - `Calendar` keeps its events in `calendar.events`. `sync(source)` replaces
    them with `source.events()`. If the source raises, the old events stay.
- `busylight.ics`
  - `IcsSource(url, session=None, timeout=None)` is an `EventSource` that
    downloads the feed with `requests`. Network errors are raised as
    `requests.RequestException`.
  - `parse_events(lines)` collects the events from the lines of an ICS
    document. Only `DTSTART` and `DTEND` are read. An event whose start or end
    is missing or cannot be parsed, or that does not end after it starts, is
    dropped.
  - `parse_time(entry)` parses one `DTSTART`/`DTEND` line. A value ending in
    `Z` is UTC. A `TZID` parameter chooses the zone. A value with neither is
    taken as UTC. Malformed lines raise `ValueError`, and unknown zones raise
    `zoneinfo.ZoneInfoNotFoundError`.
- `busylight.timezone`
  - `load_location(name)` returns a `tzinfo`. It accepts IANA names and
    Windows names such as `W. Europe Standard Time` (the mapping is in
    `WINDOWS_ZONES`). An empty name gives UTC and `"Local"` gives the system's
    local zone.
- `busylight.status`
  - `Status` is an `IntEnum` with the members `IDLE`, `FOCUSED` and `BUSY`.
  - `Status.from_calendar(calendar, now=None)` returns `BUSY` for an event in
    progress and `FOCUSED` for an event that starts within ten minutes
    (`FOCUS_TIME`). Otherwise it returns `IDLE`. When several events match,
    the last one in the list decides. `now` defaults to the current UTC time.
  - `Transition(from_status, to_status)`. `from_status` is `None` for the
    first status recorded.
  - `Tracker.record(status)` returns a `Transition` when the status differs
    from the last one recorded, and `None` when it does not. Each transition
    is also put on the `tracker.transitions` queue.
- `busylight.light`
  - `Color` has the members `YELLOW` and `RED`.
  - `LightProvider` is a protocol with `turn_on()`, `turn_off()` and
    `change_color(color)`.
  - `Controller(provider).process_status_transition(transition)` calls
    `turn_off()` when the new status is `IDLE`. Otherwise it calls
    `turn_on()` if the previous status was `IDLE`, and then sets the colour:
    yellow for `FOCUSED`, red for `BUSY`.
- `busylight.scheduler`
  - `every(tick, fn, stop)` calls `fn` once per `tick` until the
    `threading.Event` `stop` is set. `tick` is a number of seconds or a
    `timedelta`. The first call comes one tick after the start. Ticks missed
    while `fn` runs long are skipped. A tick that is not positive raises
    `ValueError`.

## Example

```python
import threading
from datetime import datetime, timezone

from busylight.calendar import Calendar
from busylight.ics import IcsSource
from busylight.light import Color, Controller
from busylight.scheduler import every
from busylight.status import Status, Tracker


class ConsoleLight:
    def turn_on(self):
        print("light on")

    def turn_off(self):
        print("light off")

    def change_color(self, color: Color):
        print("light", color.name.lower())


calendar = Calendar()
source = IcsSource("https://calendar.example.com/me.ics", timeout=10)
controller = Controller(ConsoleLight())
tracker = Tracker()
stop = threading.Event()


def tick():
    calendar.sync(source)
    status = Status.from_calendar(calendar, datetime.now(timezone.utc))
    transition = tracker.record(status)
    if transition is not None:
        controller.process_status_transition(transition)


every(60, tick, stop)
```

## What it does not do

- The package has no driver for any real light. You supply a `LightProvider`
  that talks to your own device.
- It has no command-line program or configuration file. You connect the
  pieces yourself, as in the example above.
- ICS support covers only `DTSTART`/`DTEND` lines of `VEVENT` blocks. It does
  not expand recurrences, does not read all-day dates and does not unfold
  folded lines.