"""Shutter states and error flags."""

from __future__ import annotations

import enum


class ShutterState(enum.IntEnum):
    """States of the shutter motor state machine."""

    IDLE = 0
    OPENING = 1
    CLOSING = 2
    ERROR = 3


class ErrorFlag(enum.IntFlag):
    """Bits of the controller's error register."""

    NONE = 0
    TIMEOUT_CLOSING = 2
    TIMEOUT_OPENING = 4
    LOST_CLOSED_SENSOR = 8
    LOST_OPEN_SENSOR = 16
    BOTH_SENSORS_CONFIRMED = 32


def error_matches(errors: ErrorFlag, flag: ErrorFlag) -> bool:
    """Return True when no bit outside ``flag`` is set in ``errors``.

    An empty register therefore matches any flag.
    """
    return (errors | flag) == flag