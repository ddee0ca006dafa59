"""Ohmmeter measurement, E24 colour-code lookup, OLED frame buffer and LED matrix frames."""

__version__ = "0.1.0"