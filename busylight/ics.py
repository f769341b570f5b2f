"""Calendar events read from an iCalendar (ICS) feed."""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo
from typing import Iterable

import requests

from busylight.calendar import Event
from busylight.timezone import load_location

_SEP_COMPONENT = ":"
_SEP_TOKEN = ";"
_SEP_KEY_VALUE = "="

_BEGIN_EVENT = "BEGIN:VEVENT"
_END_EVENT = "END:VEVENT"

_TOKEN_START = "DTSTART"
_TOKEN_END = "DTEND"
_TOKEN_TIMEZONE = "TZID"

_STAMP_RE = re.compile(r"[0-9]{8}T[0-9]{6}")


def _parse_stamp(value: str, tz: tzinfo) -> datetime:
    if not _STAMP_RE.fullmatch(value):
        raise ValueError(f"invalid time: {value}")
    return datetime.strptime(value, "%Y%m%dT%H%M%S").replace(tzinfo=tz)


def parse_time(entry: str) -> datetime:
    """Parse the date-time of a DTSTART or DTEND line.

    Values ending in ``Z`` are UTC; a TZID parameter selects a zone (IANA or
    Windows name); otherwise the time is taken as UTC.

    Raises:
        ValueError: if the line or its value is malformed.
        zoneinfo.ZoneInfoNotFoundError: if the TZID names no known zone.
    """
    name, sep, value = entry.partition(_SEP_COMPONENT)
    if not sep:
        raise ValueError(f"invalid entry: {entry}")

    if value.endswith("Z"):
        return _parse_stamp(value[:-1], timezone.utc)

    tokens = name.split(_SEP_TOKEN)
    if len(tokens) > 1 and tokens[1].startswith(_TOKEN_TIMEZONE):
        _, has_value, zone_name = tokens[1].partition(_SEP_KEY_VALUE)
        if not has_value:
            raise ValueError(f"invalid token: {tokens[1]}")
        return _parse_stamp(value, load_location(zone_name))

    return _parse_stamp(value, timezone.utc)


def _try_parse_time(entry: str) -> datetime | None:
    try:
        return parse_time(entry)
    except (ValueError, LookupError, OSError):
        return None


def parse_events(lines: Iterable[str]) -> list[Event]:
    """Collect the valid events from the lines of an ICS document.

    A start or end that cannot be parsed is cleared, so its event is dropped.
    """
    events: list[Event] = []
    start: datetime | None = None
    end: datetime | None = None

    for raw in lines:
        line = raw.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]

        if line == _BEGIN_EVENT:
            start = end = None
        elif line.startswith(_TOKEN_START):
            start = _try_parse_time(line)
        elif line.startswith(_TOKEN_END):
            end = _try_parse_time(line)
        elif line == _END_EVENT:
            event = Event(start, end)
            if event.is_valid():
                events.append(event)

    return events


class IcsSource:
    """An event source that downloads an ICS feed over HTTP."""

    def __init__(
        self,
        url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def events(self) -> list[Event]:
        """Fetch the feed and return its events.

        Raises:
            requests.RequestException: if the feed cannot be fetched.
        """
        response = self.session.get(self.url, timeout=self.timeout)
        text = response.content.decode("utf-8", errors="replace")
        return parse_events(text.split("\n"))