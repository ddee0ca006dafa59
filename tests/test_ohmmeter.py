import math

import pytest

from ohmscope.config import ADC_MAX_BATTERY, ADC_MAX_USB, R_DIVISOR
from ohmscope.ohmmeter import (
    COLOR_NAMES,
    E24_VALUES,
    Color,
    ResistorColors,
    find_closest_e24,
    get_resistor_colors,
    resistance_from_adc,
)


@pytest.mark.parametrize("value", E24_VALUES)
def test_every_e24_value_maps_to_itself(value):
    assert find_closest_e24(float(value)) == value


def test_closest_e24_rounds_to_neighbour():
    assert find_closest_e24(1040.0) == 1000
    assert find_closest_e24(4650.0) == 4700


def test_closest_e24_range_limits():
    assert find_closest_e24(400.0) is None
    assert find_closest_e24(200000.0) is None
    assert find_closest_e24(500.0) == 510
    assert find_closest_e24(105000.0) == 100000


def test_colors_for_4700():
    assert get_resistor_colors(4700) == ResistorColors(Color.YELLOW, Color.VIOLET, Color.RED)


def test_colors_for_510():
    colors = get_resistor_colors(510)
    assert colors.bands == (Color.GREEN, Color.BROWN, Color.BROWN)


def test_colors_for_100000():
    assert get_resistor_colors(100000).bands == (Color.BROWN, Color.BLACK, Color.YELLOW)


@pytest.mark.parametrize("value", [0, -5, 7, 10**12])
def test_colors_invalid(value):
    assert get_resistor_colors(value) is None


@pytest.mark.parametrize("value", E24_VALUES)
def test_colors_reconstruct_value(value):
    colors = get_resistor_colors(value)
    rebuilt = (colors.band1 * 10 + colors.band2) * 10 ** colors.multiplier
    assert rebuilt == value


def test_color_labels():
    colors = get_resistor_colors(4700)
    assert [band.label for band in colors.bands] == ["Amarelo", "Violeta", "Vermelho"]
    assert [c.label for c in Color] == list(COLOR_NAMES)


@pytest.mark.parametrize("adc_max", [ADC_MAX_USB, ADC_MAX_BATTERY])
def test_open_and_short(adc_max):
    assert resistance_from_adc(adc_max, adc_max) == math.inf
    assert resistance_from_adc(adc_max - 15, adc_max) == math.inf
    assert resistance_from_adc(14.9, adc_max) == 0.0


def test_half_scale_equals_divisor():
    assert resistance_from_adc(ADC_MAX_USB / 2, ADC_MAX_USB) == pytest.approx(R_DIVISOR)


def test_resistance_increases_with_reading():
    low = resistance_from_adc(1000, ADC_MAX_USB)
    high = resistance_from_adc(3000, ADC_MAX_USB)
    assert 0 < low < high