"""Time-based debouncing on a wrapping 32-bit microsecond clock."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF


@dataclass
class Debouncer:
    """Accepts an event only when more than ``interval_us`` passed since the last one."""

    interval_us: int
    last_us: int = 0

    def check(self, now_us: int) -> bool:
        """Return True and remember ``now_us`` if the debounce interval has elapsed."""
        now_us &= _MASK32
        if ((now_us - self.last_us) & _MASK32) > self.interval_us:
            self.last_us = now_us
            return True
        return False