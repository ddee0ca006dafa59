"""Resistance calculation, E24 rounding and colour-band decoding."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from ohmscope.config import ADC_EDGE_MARGIN, R_DIVISOR

E24_VALUES: tuple[int, ...] = (
    510, 560, 620, 680, 750, 820, 910, 1000, 1100, 1200, 1300, 1500, 1600, 1800, 2000,
    2200, 2400, 2700, 3000, 3300, 3600, 3900, 4300, 4700, 5100, 5600, 6200, 6800, 7500,
    8200, 9100, 10000, 11000, 12000, 13000, 15000, 16000, 18000, 20000, 22000, 24000,
    27000, 30000, 33000, 36000, 39000, 43000, 47000, 51000, 56000, 62000, 68000, 75000,
    82000, 91000, 100000,
)

COLOR_NAMES: tuple[str, ...] = (
    "Preto", "Marrom", "Vermelho", "Laranja", "Amarelo",
    "Verde", "Azul", "Violeta", "Cinza", "Branco",
)

_LOWER_LIMIT = E24_VALUES[0] * 0.90
_UPPER_LIMIT = E24_VALUES[-1] * 1.10


class Color(IntEnum):
    """Resistor colour code; the value is the digit the colour stands for."""

    BLACK = 0
    BROWN = 1
    RED = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    BLUE = 6
    VIOLET = 7
    GREY = 8
    WHITE = 9

    @property
    def label(self) -> str:
        """Name of the colour as shown on the display."""
        return COLOR_NAMES[self.value]


@dataclass(frozen=True)
class ResistorColors:
    """The two significant-digit bands and the multiplier band of a resistor."""

    band1: Color
    band2: Color
    multiplier: Color

    @property
    def bands(self) -> tuple[Color, Color, Color]:
        return (self.band1, self.band2, self.multiplier)


def resistance_from_adc(avg_adc: float, adc_max: int) -> float:
    """Resistance of the unknown resistor from an averaged ADC reading.

    Returns ``math.inf`` for an open circuit and ``0.0`` for a short.
    """
    if avg_adc >= adc_max - ADC_EDGE_MARGIN:
        return math.inf
    if avg_adc < ADC_EDGE_MARGIN:
        return 0.0
    return (R_DIVISOR * avg_adc) / (adc_max - avg_adc)


def find_closest_e24(measured_r: float) -> int | None:
    """Nearest E24 value to ``measured_r``, or None when outside the covered range."""
    if measured_r < _LOWER_LIMIT or measured_r > _UPPER_LIMIT:
        return None
    return min(E24_VALUES, key=lambda value: abs(measured_r - value))


def get_resistor_colors(standard_r: int) -> ResistorColors | None:
    """Colour bands for a standard resistance, or None if it cannot be coded."""
    if standard_r <= 0:
        return None
    digits = str(int(standard_r))
    if len(digits) < 2:
        return None
    multiplier = len(digits) - 2
    if multiplier > 9:
        return None
    return ResistorColors(Color(int(digits[0])), Color(int(digits[1])), Color(multiplier))