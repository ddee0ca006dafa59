"""Screen layouts for the OLED: start-up splash and the measurement view."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from ohmscope.config import ADC_MAX_BATTERY, ADC_MAX_USB
from ohmscope.font import GLYPH_WIDTH
from ohmscope.ohmmeter import ResistorColors
from ohmscope.ssd1306 import SSD1306

RES_X_START = 20
RES_Y_CENTER = 48
RES_BODY_W = 50
RES_BODY_H = 12
RES_LEAD_LEN = 12
RES_BAND_W = 5
RES_BAND_SPACE = 4

NOT_AVAILABLE = "---N/D---"
STARTUP_LINES = ("EMBARCATECH", "PROJETO", "OHMIMETRO")
STARTUP_DELAY_S = 2.1

_ADC_WIDTH = 5
_VALUE_WIDTH = 14


@dataclass(frozen=True)
class ScreenText:
    """The strings shown on the measurement screen."""

    adc: str
    measured: str
    standard: str
    band1: str
    band2: str
    multiplier: str
    mode: str


def format_readings(
    avg_adc: float,
    measured_r: float,
    standard_r: int | None,
    colors: ResistorColors | None,
    adc_mode: int,
) -> ScreenText:
    """Turn a measurement into the texts drawn on the display."""
    adc = f"{max(avg_adc, 0.0):4.0f}"[:_ADC_WIDTH]

    open_circuit = measured_r < 0 or math.isinf(measured_r)
    if open_circuit:
        measured = "Aberto"
    elif measured_r < 1.0:
        measured = " Curto"
    else:
        measured = f"{measured_r:.0f}"[:_VALUE_WIDTH]

    if standard_r is not None and standard_r > 0:
        standard = str(standard_r)[:_VALUE_WIDTH]
    elif not open_circuit and measured_r > 1.0:
        standard = "N/D E24"
    else:
        standard = "------"

    if colors is not None:
        band1, band2, multiplier = (band.label for band in colors.bands)
    else:
        band1 = band2 = multiplier = NOT_AVAILABLE

    if adc_mode == ADC_MAX_USB:
        mode = "USB"
    elif adc_mode == ADC_MAX_BATTERY:
        mode = "BAT"
    else:
        mode = "   "

    return ScreenText(adc, measured, standard, band1, band2, multiplier, mode)


def draw_resistor(ssd: SSD1306) -> None:
    """Draw a three-band resistor symbol in the lower half of the screen."""
    body_x = RES_X_START + RES_LEAD_LEN
    body_y = RES_Y_CENTER - RES_BODY_H // 2
    body_end_x = body_x + RES_BODY_W
    ssd.line(RES_X_START, RES_Y_CENTER, body_x, RES_Y_CENTER, True)
    ssd.line(body_end_x, RES_Y_CENTER, body_end_x + RES_LEAD_LEN, RES_Y_CENTER, True)
    ssd.rect(body_y, body_x, RES_BODY_W, RES_BODY_H, True, False)
    band_start_x = body_x + RES_BAND_SPACE * 2
    for band in range(3):
        left = band_start_x + band * (RES_BAND_W + RES_BAND_SPACE)
        ssd.rect(body_y + 1, left, RES_BAND_W, RES_BODY_H - 2, True, True)


def startup_screen(ssd: SSD1306, sleep: Callable[[float], object] = time.sleep) -> None:
    """Show the project title and a resistor, wait, then blank the screen."""
    ssd.fill(False)
    center_x = ssd.width // 2
    start_y = 8
    line_height = 10
    for row, text in enumerate(STARTUP_LINES):
        x = center_x - (len(text) * GLYPH_WIDTH) // 2
        ssd.draw_string(text, x, start_y + row * line_height)
    draw_resistor(ssd)
    ssd.send_data()
    sleep(STARTUP_DELAY_S)
    ssd.fill(False)
    ssd.send_data()


def update_main_display(
    ssd: SSD1306,
    avg_adc: float,
    measured_r: float,
    standard_r: int | None,
    colors: ResistorColors | None,
    adc_mode: int,
) -> ScreenText:
    """Redraw the measurement screen and send it; returns the texts shown."""
    text = format_readings(avg_adc, measured_r, standard_r, colors, adc_mode)

    ssd.fill(False)
    top_section_h = 28
    bottom_section_y = top_section_h + 2
    vertical_line_x = 38

    label_x = 2
    value_x = label_x + GLYPH_WIDTH * 7
    color_y = 2
    color_line_height = 9
    rows = (("Faixa:", text.band1), ("Faixa:", text.band2), ("Multi:", text.multiplier))
    for row, (label, value) in enumerate(rows):
        y = color_y + row * color_line_height
        ssd.draw_string(label, label_x, y)
        ssd.draw_string(value, value_x, y)

    ssd.line(0, top_section_h, ssd.width - 1, top_section_h, True)
    ssd.line(vertical_line_x, bottom_section_y - 1, vertical_line_x, ssd.height - 1, True)

    label_y = bottom_section_y + 2
    value_y1 = label_y + 10
    value_y2 = value_y1 + 10
    ssd.draw_string("ADC", 5, label_y)
    ssd.draw_string(text.adc, 5, value_y1)
    ssd.draw_string(text.mode, 5, value_y2)

    res_label_x = vertical_line_x + 5
    res_value_x = res_label_x + 25
    ssd.draw_string("Ohms", res_value_x, label_y)
    ssd.draw_string("RL:", res_label_x, value_y1)
    ssd.draw_string(text.measured, res_value_x, value_y1)
    ssd.draw_string("CM:", res_label_x, value_y2)
    ssd.draw_string(text.standard, res_value_x, value_y2)

    ssd.send_data()
    return text