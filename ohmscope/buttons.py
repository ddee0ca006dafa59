"""Debounced push button fed by GPIO edge events."""

from __future__ import annotations

import threading

from ohmscope.config import BUTTON_A_PIN, BUTTON_DEBOUNCE_US
from ohmscope.debouncer import Debouncer

EDGE_LOW = 0x1
EDGE_HIGH = 0x2
EDGE_FALL = 0x4
EDGE_RISE = 0x8


class Button:
    """Latches a press on a debounced falling edge until it is consumed."""

    def __init__(self, pin: int = BUTTON_A_PIN, debounce_us: int = BUTTON_DEBOUNCE_US) -> None:
        self.pin = pin
        self._debouncer = Debouncer(debounce_us)
        self._pressed = False
        self._lock = threading.Lock()

    @property
    def pressed(self) -> bool:
        return self._pressed

    def on_edge(self, gpio: int, events: int, now_us: int) -> bool:
        """Handle a GPIO interrupt; returns True if it registered a press."""
        if gpio != self.pin or not events & EDGE_FALL:
            return False
        with self._lock:
            if not self._debouncer.check(now_us):
                return False
            self._pressed = True
        return True

    def consume(self) -> bool:
        """Return whether a press is pending and clear it."""
        with self._lock:
            pressed, self._pressed = self._pressed, False
        return pressed