"""Down-counting software timers with a reserved "stopped" value."""

from __future__ import annotations

B_TIMER_OFF = 0xFF
W_TIMER_OFF = 0xFFFF
L_TIMER_OFF = 0xFFFFFFFF

B_TIMER_NULL = 0x00
W_TIMER_NULL = 0x0000
L_TIMER_NULL = 0x00000000


class Counter:
    """An unsigned down-counter of a fixed width.

    The all-ones value marks the counter as stopped (expired). Decrementing a
    running counter from zero wraps it to that value, so a counter loaded
    with ``n`` expires on the ``n + 1``-th decrement. A new counter is stopped.
    """

    def __init__(self, bits: int) -> None:
        if bits <= 0:
            raise ValueError(f"counter width must be positive, got {bits}")
        self._bits = bits
        self._off = (1 << bits) - 1
        self._value = self._off

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def off_value(self) -> int:
        """The reserved value meaning the counter is stopped."""
        return self._off

    def load(self, value: int) -> None:
        """Start the counter from ``value``."""
        if not 0 <= value <= self._off:
            raise ValueError(
                f"value {value} does not fit in a {self._bits}-bit counter"
            )
        self._value = value

    def decrement(self) -> int:
        """Count down by one unless stopped; return the new value."""
        if self._value != self._off:
            self._value = (self._value - 1) & self._off
        return self._value

    def stop(self) -> None:
        """Stop the counter."""
        self._value = self._off

    def value(self) -> int:
        """Return the current counter value."""
        return self._value

    def expired(self) -> bool:
        """Return True when the counter is stopped or has run out."""
        return self._value == self._off

    def __repr__(self) -> str:
        return f"Counter(bits={self._bits}, value={self._value})"


def byte_counter() -> Counter:
    """Return a stopped 8-bit counter."""
    return Counter(8)


def word_counter() -> Counter:
    """Return a stopped 16-bit counter."""
    return Counter(16)


def long_counter() -> Counter:
    """Return a stopped 32-bit counter."""
    return Counter(32)