"""5x5 WS2812 matrix showing the three colour bands of a resistor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ohmscope.ohmmeter import Color, ResistorColors

MATRIX_PIXELS = 25
BAND_BRIGHTNESS = 0.4

# Logical pixel indices of the columns holding band 1, band 2 and the multiplier.
BAND_COLUMNS: tuple[tuple[int, ...], ...] = (
    (24, 15, 14, 5, 4),
    (22, 17, 12, 7, 2),
    (20, 19, 10, 9, 0),
)


@dataclass(frozen=True)
class Rgb:
    """Colour with channel intensities between 0.0 and 1.0."""

    r: float
    g: float
    b: float


RESISTOR_RGB: dict[Color, Rgb] = {
    Color.BLACK: Rgb(0.0, 0.0, 0.0),
    Color.BROWN: Rgb(0.065, 0.015, 0.0075),
    Color.RED: Rgb(0.25, 0.0, 0.0),
    Color.ORANGE: Rgb(0.25, 0.15, 0.0),
    Color.YELLOW: Rgb(0.25, 0.25, 0.0),
    Color.GREEN: Rgb(0.0, 0.25, 0.0),
    Color.BLUE: Rgb(0.0, 0.0, 0.25),
    Color.VIOLET: Rgb(0.25, 0.1, 0.45),
    Color.GREY: Rgb(0.125, 0.125, 0.15),
    Color.WHITE: Rgb(0.25, 0.25, 0.25),
}


def _channel(value: float, brightness: float) -> int:
    return int(max(0.0, min(1.0, value * brightness)) * 255.0)


def color_to_grb_word(color: Rgb, brightness: float = 1.0) -> int:
    """32-bit word for the LED shift program: G in the top byte, then R, then B."""
    return (
        (_channel(color.g, brightness) << 24)
        | (_channel(color.r, brightness) << 16)
        | (_channel(color.b, brightness) << 8)
    )


def resistor_frame(colors: ResistorColors | None) -> list[int]:
    """Words for all pixels; band columns lit, everything else dark."""
    black = color_to_grb_word(RESISTOR_RGB[Color.BLACK])
    frame = [black] * MATRIX_PIXELS
    if colors is None:
        return frame
    for column, band in zip(BAND_COLUMNS, colors.bands):
        word = color_to_grb_word(RESISTOR_RGB[band], BAND_BRIGHTNESS)
        for index in column:
            frame[index] = word
    return frame


class LedMatrix:
    """Pushes frames, pixel by pixel, into a word sink such as a PIO FIFO."""

    def __init__(self, sink: Callable[[int], object]) -> None:
        self.sink = sink

    def _push(self, frame: list[int]) -> None:
        for word in frame:
            self.sink(word)

    def clear(self) -> None:
        self._push(resistor_frame(None))

    def show_resistor_colors(self, colors: ResistorColors | None) -> None:
        self._push(resistor_frame(colors))