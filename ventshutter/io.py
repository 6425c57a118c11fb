"""Digital inputs and outputs of the shutter controller."""

from __future__ import annotations

import abc
import enum


class Channel(enum.Enum):
    """Digital I/O points wired to the shutter."""

    OPEN_BUTTON = "I0_0"
    CLOSE_BUTTON = "I0_1"
    CLOSED_SENSOR = "I0_2"
    OPEN_SENSOR = "I0_3"
    MOTOR_OPEN = "Q0_0"
    MOTOR_CLOSE = "Q0_1"
    OPEN_LIGHT = "Q0_2"
    CLOSE_LIGHT = "Q0_3"

    @property
    def is_input(self) -> bool:
        return self.value.startswith("I")


class ShutterIO(abc.ABC):
    """Access to the controller's digital points."""

    @abc.abstractmethod
    def read(self, channel: Channel) -> bool:
        """Return True when the input is high."""

    @abc.abstractmethod
    def write(self, channel: Channel, level: bool) -> None:
        """Drive the output high (True) or low (False)."""


def _require_input(channel: Channel) -> None:
    if not channel.is_input:
        raise ValueError(f"{channel.name} is not an input")


def _require_output(channel: Channel) -> None:
    if channel.is_input:
        raise ValueError(f"{channel.name} is not an output")


class SimulatedIO(ShutterIO):
    """In-memory I/O: inputs are set by the caller, outputs are recorded."""

    def __init__(self) -> None:
        self._inputs = {ch: False for ch in Channel if ch.is_input}
        self._outputs = {ch: False for ch in Channel if not ch.is_input}

    def read(self, channel: Channel) -> bool:
        _require_input(channel)
        return self._inputs[channel]

    def write(self, channel: Channel, level: bool) -> None:
        _require_output(channel)
        self._outputs[channel] = bool(level)

    def set_input(self, channel: Channel, level: bool) -> None:
        """Set the level seen on an input."""
        _require_input(channel)
        self._inputs[channel] = bool(level)

    def output(self, channel: Channel) -> bool:
        """Return the level last written to an output."""
        _require_output(channel)
        return self._outputs[channel]