"""Measurement loop tying the ADC, display, LED matrix and button together."""

from __future__ import annotations

import argparse
import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from ohmscope.buttons import Button
from ohmscope.config import ADC_MAX_BATTERY, ADC_MAX_USB, ADC_SAMPLES
from ohmscope.display import format_readings, update_main_display
from ohmscope.led_matrix import LedMatrix
from ohmscope.ohmmeter import (
    ResistorColors,
    find_closest_e24,
    get_resistor_colors,
    resistance_from_adc,
)
from ohmscope.ssd1306 import SSD1306

log = logging.getLogger(__name__)

CYCLE_DELAY_S = 0.5
_ADC_FULL_SCALE = 4095


class AdcMode(IntEnum):
    """Full-scale ADC value used, depending on the power source."""

    USB = ADC_MAX_USB
    BATTERY = ADC_MAX_BATTERY

    @property
    def label(self) -> str:
        return "USB" if self is AdcMode.USB else "BAT"

    def toggled(self) -> AdcMode:
        return AdcMode.BATTERY if self is AdcMode.USB else AdcMode.USB


@dataclass(frozen=True)
class Reading:
    """One averaged measurement and what it maps to."""

    avg_adc: float
    resistance: float
    standard: int | None
    colors: ResistorColors | None


class Ohmmeter:
    """Reads the divider, works out the resistance and updates the outputs."""

    def __init__(
        self,
        read_adc: Callable[[], int],
        display: SSD1306,
        matrix: LedMatrix,
        button: Button | None = None,
    ) -> None:
        self.read_adc = read_adc
        self.display = display
        self.matrix = matrix
        self.button = button
        self.mode = AdcMode.USB

    def toggle_mode(self) -> AdcMode:
        self.mode = self.mode.toggled()
        log.info("ADC mode changed to %d (%s)", int(self.mode), self.mode.label)
        return self.mode

    def measure(self) -> Reading:
        total = sum(self.read_adc() for _ in range(ADC_SAMPLES))
        avg_adc = total / ADC_SAMPLES
        resistance = resistance_from_adc(avg_adc, int(self.mode))
        standard = None
        colors = None
        if resistance > 0:
            standard = find_closest_e24(resistance)
            if standard is not None:
                colors = get_resistor_colors(standard)
        return Reading(avg_adc, resistance, standard, colors)

    def step(self) -> Reading:
        """Run one cycle: handle a button press, measure and refresh the outputs."""
        if self.button is not None and self.button.consume():
            self.toggle_mode()
        reading = self.measure()
        update_main_display(
            self.display,
            reading.avg_adc,
            reading.resistance,
            reading.standard,
            reading.colors,
            self.mode,
        )
        self.matrix.show_resistor_colors(reading.colors)
        return reading

    def run(self, sleep: Callable[[float], object] = time.sleep) -> None:
        while True:
            self.step()
            sleep(CYCLE_DELAY_S)


class _FrameStore:
    """Bus that keeps the last data block written to it."""

    def __init__(self) -> None:
        self.last_frame = b""

    def write(self, address: int, data: bytes) -> None:
        if len(data) > 2:
            self.last_frame = bytes(data)


def _render(ssd: SSD1306) -> str:
    return "\n".join(
        "".join("#" if ssd.get_pixel(x, y) else "." for x in range(ssd.width))
        for y in range(ssd.height)
    )


def _adc_value(text: str) -> int:
    value = int(text)
    if not 0 <= value <= _ADC_FULL_SCALE:
        raise argparse.ArgumentTypeError(f"ADC reading must be 0..{_ADC_FULL_SCALE}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Simulate one measurement cycle for a fixed ADC reading and print it."""
    parser = argparse.ArgumentParser(
        prog="ohmscope", description="Ohmmeter measurement for a given ADC reading."
    )
    parser.add_argument("--adc", type=_adc_value, required=True, help="raw ADC sample")
    parser.add_argument("--battery", action="store_true", help="use the battery full scale")
    parser.add_argument("--show-display", action="store_true", help="print the OLED frame")
    args = parser.parse_args(argv)

    ssd = SSD1306(_FrameStore())
    words: list[int] = []
    meter = Ohmmeter(lambda: args.adc, ssd, LedMatrix(words.append))
    if args.battery:
        meter.toggle_mode()
    reading = meter.step()
    text = format_readings(
        reading.avg_adc, reading.resistance, reading.standard, reading.colors, meter.mode
    )
    print(f"ADC:   {text.adc.strip()} ({text.mode})")
    print(f"RL:    {text.measured.strip()}" + ("" if math.isinf(reading.resistance) else " ohm"))
    print(f"CM:    {text.standard}")
    print(f"Bands: {text.band1} {text.band2} {text.multiplier}")
    if args.show_display:
        print(_render(ssd))
    return 0