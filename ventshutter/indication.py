"""Light signalling of the shutter state: steady, blinking and error lights."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .counters import Counter, word_counter
from .io import Channel, ShutterIO
from .states import ErrorFlag, ShutterState, error_matches

# Periods are in controller cycles (one cycle is 10 ms).
TIME_BLINK_ON_MOT = 50
TIME_BLINK_ON_ERR_1 = 100
TIME_BLINK_ON_ERR_2 = 200


class BlinkCommand(enum.Enum):
    """What a signal light has been asked to do."""

    NO_BLINK = 0
    NORMAL_BLINK = 1
    FAST_BLINK = 2


class BlinkState(enum.IntEnum):
    """States of a blink state machine."""

    IDLE = 0
    ON = 1
    OFF = 2
    DELAY_ON = 3
    DELAY_OFF = 4


@dataclass
class _Lamp:
    channel: Channel
    sensor: Channel
    moving_state: ShutterState
    command: BlinkCommand = BlinkCommand.NO_BLINK
    blink: BlinkState = BlinkState.IDLE
    timer: Counter = field(default_factory=word_counter)
    duration: int = 0
    debug: int = 0


class StateIndicator:
    """Drives the open and close lights from the shutter state and errors.

    Each light shows its end position steadily while the shutter is idle,
    blinks while the motor moves towards it, and both lights blink together
    while a timeout error is present. Call :meth:`update` once per cycle.
    """

    def __init__(self, io: ShutterIO) -> None:
        self._io = io
        self.reset()

    def reset(self) -> None:
        """Return every light state machine, timer and debug value to rest."""
        self._close = _Lamp(
            Channel.CLOSE_LIGHT, Channel.CLOSED_SENSOR, ShutterState.CLOSING
        )
        self._open = _Lamp(
            Channel.OPEN_LIGHT, Channel.OPEN_SENSOR, ShutterState.OPENING
        )
        self._error_blink = BlinkState.IDLE
        self._error_timer = word_counter()
        self._error_duration = 0
        self._error_debug = 0

    def update(
        self,
        shutter_state: ShutterState,
        errors: ErrorFlag,
        open_pressed: bool,
        close_pressed: bool,
    ) -> None:
        """Run one signalling cycle.

        ``open_pressed`` and ``close_pressed`` are True only in the cycle in
        which the corresponding button went down.
        """
        state = ShutterState(shutter_state)
        errors = ErrorFlag(errors)
        pressed = bool(open_pressed or close_pressed)
        no_error = errors == ErrorFlag.NONE

        self._close.debug = 0
        self._open.debug = 0

        self._close.timer.decrement()
        self._open.timer.decrement()
        self._error_timer.decrement()

        if pressed:
            self._close.timer.stop()
            self._open.timer.stop()
            self._error_timer.stop()
            self._close.command = BlinkCommand.NO_BLINK
            self._open.command = BlinkCommand.NO_BLINK
            self._io.write(Channel.CLOSE_LIGHT, False)
            self._io.write(Channel.OPEN_LIGHT, False)

        quit_blink = pressed or not no_error

        self._select_command(self._close, state, no_error)
        self._step_lamp(self._close, self._close, quit_blink)

        self._select_command(self._open, state, no_error)
        # Leaving the open light's blink resets the close light's machine.
        self._step_lamp(self._open, self._close, quit_blink)

        self._step_error(errors, pressed or no_error)

    def close_light_debug(self) -> int:
        """Return the close light's diagnostic value from the last cycle."""
        return self._close.debug

    def open_light_debug(self) -> int:
        """Return the open light's diagnostic value from the last cycle."""
        return self._open.debug

    def error_debug(self) -> int:
        """Return the error signalling diagnostic value."""
        return self._error_debug

    def _select_command(
        self, lamp: _Lamp, state: ShutterState, no_error: bool
    ) -> None:
        if no_error and state is ShutterState.IDLE:
            sensor_on = self._io.read(lamp.sensor)
            self._io.write(lamp.channel, sensor_on)
            lamp.command = BlinkCommand.NO_BLINK
            lamp.debug = 1 if sensor_on else 2
        elif no_error and state is lamp.moving_state:
            lamp.command = BlinkCommand.NORMAL_BLINK
        elif not no_error:
            lamp.command = BlinkCommand.FAST_BLINK

    def _step_lamp(self, lamp: _Lamp, quit_target: _Lamp, quit_blink: bool) -> None:
        if lamp.blink is BlinkState.IDLE:
            if lamp.command is BlinkCommand.NORMAL_BLINK:
                lamp.duration = TIME_BLINK_ON_MOT
                lamp.timer.load(lamp.duration)
                lamp.blink = BlinkState.ON
        elif lamp.blink is BlinkState.ON:
            self._io.write(lamp.channel, True)
            lamp.blink = BlinkState.DELAY_ON
        elif lamp.blink is BlinkState.OFF:
            self._io.write(lamp.channel, False)
            lamp.blink = BlinkState.DELAY_OFF
        else:
            on_phase = lamp.blink is BlinkState.DELAY_ON
            lamp.debug = 3 if on_phase else 4
            if lamp.timer.expired():
                lamp.timer.load(lamp.duration)
                lamp.blink = BlinkState.OFF if on_phase else BlinkState.IDLE
            if quit_blink:
                self._io.write(lamp.channel, False)
                lamp.timer.stop()
                quit_target.blink = BlinkState.IDLE

    def _set_both(self, level: bool) -> None:
        self._io.write(Channel.OPEN_LIGHT, level)
        self._io.write(Channel.CLOSE_LIGHT, level)

    def _step_error(self, errors: ErrorFlag, quit_blink: bool) -> None:
        blink = self._error_blink
        if blink is BlinkState.IDLE:
            if self._open.command is BlinkCommand.FAST_BLINK and error_matches(
                errors, ErrorFlag.TIMEOUT_OPENING
            ):
                self._start_error_blink(1, TIME_BLINK_ON_ERR_1)
            elif self._close.command is BlinkCommand.FAST_BLINK and error_matches(
                errors, ErrorFlag.TIMEOUT_CLOSING
            ):
                self._start_error_blink(2, TIME_BLINK_ON_ERR_2)
            else:
                self._error_debug = 3
        elif blink is BlinkState.ON:
            self._set_both(True)
            self._error_blink = BlinkState.DELAY_ON
        elif blink is BlinkState.OFF:
            self._set_both(False)
            self._error_blink = BlinkState.DELAY_OFF
        elif blink is BlinkState.DELAY_ON:
            if self._error_timer.expired():
                self._error_timer.load(self._error_duration)
                self._error_blink = BlinkState.OFF
            if quit_blink:
                self._set_both(False)
                self._error_timer.stop()
                self._error_blink = BlinkState.IDLE
        else:
            if self._error_timer.expired():
                self._error_timer.load(self._error_duration)
                self._error_blink = BlinkState.IDLE
            if quit_blink:
                self._set_both(False)
                self._error_timer.stop()

    def _start_error_blink(self, debug: int, duration: int) -> None:
        self._error_debug = debug
        self._error_duration = duration
        self._error_timer.load(duration)
        self._error_blink = BlinkState.ON