"""Mapping of presence status changes onto light actions."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable

from busylight.status import Status, Transition


class Color(IntEnum):
    """Colours the light can show."""

    YELLOW = 0
    RED = 1


@runtime_checkable
class LightProvider(Protocol):
    """A light that can be switched on and off and change colour."""

    def turn_on(self) -> None:
        """Switch the light on, raising on failure."""
        ...

    def turn_off(self) -> None:
        """Switch the light off, raising on failure."""
        ...

    def change_color(self, color: Color) -> None:
        """Set the light to ``color``, raising on failure."""
        ...


_STATUS_COLORS: dict[Status, Color] = {
    Status.FOCUSED: Color.YELLOW,
    Status.BUSY: Color.RED,
}


class Controller:
    """Drives a light provider from status transitions."""

    def __init__(self, provider: LightProvider) -> None:
        self.provider = provider

    def process_status_transition(self, transition: Transition) -> None:
        """Update the light to reflect ``transition``.

        Going idle turns the light off. Leaving idle turns it on first, then
        the colour is set for the new status.

        Raises:
            ValueError: if the target status has no colour.
        """
        if transition.to_status == Status.IDLE:
            self.provider.turn_off()
            return

        if transition.from_status == Status.IDLE:
            self.provider.turn_on()

        color = _STATUS_COLORS.get(transition.to_status)
        if color is None:
            raise ValueError(f"unknown status {int(transition.to_status)}")

        self.provider.change_color(color)