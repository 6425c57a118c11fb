"""Ventilation duct shutter controller: motor state machine and signalling."""

from __future__ import annotations

from .counters import long_counter
from .indication import StateIndicator
from .io import Channel, ShutterIO
from .states import ErrorFlag, ShutterState

# Monitoring periods in controller cycles (one cycle is 10 ms): 30 seconds.
TIMEOUT_CLOSING = 3000
TIMEOUT_OPENING = 3000


class MotorController:
    """Opens and closes the duct shutter from two push buttons.

    A rising edge on the open or close button starts the motor in that
    direction. The end-position sensor, or the opposite button, stops the
    motor. If the sensor is not reached within the monitoring time, a timeout
    error is raised and the motor is stopped on the following cycle.
    Call :meth:`step` once per 10 ms cycle.
    """

    def __init__(self, io: ShutterIO) -> None:
        self._io = io
        self._indicator = StateIndicator(io)
        self.reset()

    def reset(self) -> None:
        """Return to the power-up state and sample the buttons' current levels."""
        self._state = ShutterState.IDLE
        self._errors = ErrorFlag.NONE
        self._timeout_opening = long_counter()
        self._timeout_closing = long_counter()
        self._indicator.reset()
        self._open_previous = self._io.read(Channel.OPEN_BUTTON)
        self._close_previous = self._io.read(Channel.CLOSE_BUTTON)

    def step(self) -> None:
        """Run one control cycle."""
        open_pressed, close_pressed = self._detect_presses()
        open_event, close_event = open_pressed, close_pressed

        self._timeout_closing.decrement()
        self._timeout_opening.decrement()

        if self._state is ShutterState.IDLE:
            if open_event:
                open_event = False
                self._errors = ErrorFlag.NONE
                self._io.write(Channel.MOTOR_OPEN, True)
                self._timeout_opening.load(TIMEOUT_OPENING)
                self._state = ShutterState.OPENING
            if close_event:
                close_event = False
                self._errors = ErrorFlag.NONE
                self._io.write(Channel.MOTOR_CLOSE, True)
                self._timeout_closing.load(TIMEOUT_CLOSING)
                self._state = ShutterState.CLOSING
            if self._io.read(Channel.OPEN_SENSOR) and self._io.read(
                Channel.CLOSED_SENSOR
            ):
                self._errors |= ErrorFlag.BOTH_SENSORS_CONFIRMED
        elif self._state is ShutterState.OPENING:
            if self._io.read(Channel.OPEN_SENSOR) or close_event:
                self._timeout_opening.stop()
                self._io.write(Channel.MOTOR_OPEN, False)
                self._state = ShutterState.IDLE
            elif self._timeout_opening.expired():
                self._errors |= ErrorFlag.TIMEOUT_OPENING
                self._state = ShutterState.ERROR
        elif self._state is ShutterState.CLOSING:
            if self._io.read(Channel.CLOSED_SENSOR) or open_event:
                self._timeout_closing.stop()
                self._io.write(Channel.MOTOR_CLOSE, False)
                self._state = ShutterState.IDLE
            elif self._timeout_closing.expired():
                self._errors |= ErrorFlag.TIMEOUT_CLOSING
                self._state = ShutterState.ERROR
        else:
            self._io.write(Channel.MOTOR_OPEN, False)
            self._io.write(Channel.MOTOR_CLOSE, False)
            self._state = ShutterState.IDLE

        self._indicator.update(self._state, self._errors, open_pressed, close_pressed)

    def state(self) -> ShutterState:
        """Return the motor state machine's current state."""
        return self._state

    def errors(self) -> ErrorFlag:
        """Return the error register."""
        return self._errors

    def close_light_debug(self) -> int:
        """Return the close light's diagnostic value from the last cycle."""
        return self._indicator.close_light_debug()

    def open_light_debug(self) -> int:
        """Return the open light's diagnostic value from the last cycle."""
        return self._indicator.open_light_debug()

    def error_debug(self) -> int:
        """Return the error signalling diagnostic value."""
        return self._indicator.error_debug()

    def _detect_presses(self) -> tuple[bool, bool]:
        open_now = self._io.read(Channel.OPEN_BUTTON)
        close_now = self._io.read(Channel.CLOSE_BUTTON)
        open_pressed = open_now and not self._open_previous
        close_pressed = close_now and not self._close_previous
        self._open_previous = open_now
        self._close_previous = close_now
        return open_pressed, close_pressed