"""Presence status from iCalendar events, and light control driven by its changes."""

__version__ = "0.1.0"