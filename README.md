# ohmscope

Measurement and presentation logic for a simple voltage-divider ohmmeter:
an unknown resistor sits in series with a 10 kΩ reference and an ADC
reads the midpoint.

The package turns averaged ADC readings into a resistance, matches it to
the nearest E24 standard value (510 Ω to 100 kΩ), derives the colour bands
(with Portuguese colour names such as "Marrom", "Preto", "Laranja"), and
renders the result both into a 128×64 SSD1306-style monochrome frame
buffer and into a 25-word frame for a 5×5 WS2812 LED matrix.

No third-party dependencies are needed.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `ohmscope` command runs one measurement cycle for a fixed raw ADC
sample and prints what the device would show:

```
ohmscope --adc 2022
ohmscope --adc 2022 --battery
ohmscope --adc 2022 --show-display
```

Options:

- `--adc N` (required) – raw ADC sample, 0 to 4095; every one of the 200
  averaged samples takes this value.
- `--battery` – use the battery full-scale value (3630) instead of USB (4045).
- `--show-display` – also print the 128×64 OLED frame as rows of `#` and `.`.

The output lists the ADC value and mode, the measured resistance (`RL`),
the nearest E24 value (`CM`) and the three colour bands.

## Library use

```python
from ohmscope.ohmmeter import resistance_from_adc, find_closest_e24, get_resistor_colors

r = resistance_from_adc(2022.5, 4045)   # 10000.0
standard = find_closest_e24(r)          # 10000
colors = get_resistor_colors(standard)  # Color.BROWN, Color.BLACK, Color.ORANGE
```

`resistance_from_adc` returns `math.inf` for an open circuit (reading within
15 counts of full scale) and `0.0` for a short (reading below 15).
`find_closest_e24` and `get_resistor_colors` return `None` when there is no
match.

Modules:

- `ohmscope.config` – pin numbers, divider resistor, full-scale values,
  sample count and debounce interval.
- `ohmscope.ohmmeter` – `Color`, `ResistorColors`, `E24_VALUES`,
  `COLOR_NAMES`, `resistance_from_adc`, `find_closest_e24`,
  `get_resistor_colors`.
- `ohmscope.font` – the 8×8 bitmap font for printable ASCII, via `glyph`.
- `ohmscope.ssd1306` – `Command` and `SSD1306`, a frame buffer with
  `pixel`, `get_pixel`, `fill`, `rect`, `line`, `hline`, `vline`,
  `draw_char` and `draw_string`; `config`, `command` and `send_data` write
  bytes through a transport object with a `write(address, data)` method.
- `ohmscope.display` – `ScreenText`, `format_readings`, `draw_resistor`,
  `startup_screen` and `update_main_display`, which lay out the screens.
- `ohmscope.led_matrix` – `Rgb`, `color_to_grb_word`, `resistor_frame` and
  `LedMatrix`, which pushes each frame's words to a callable sink.
- `ohmscope.debouncer` – `Debouncer`, working on a wrapping 32-bit
  microsecond clock.
- `ohmscope.buttons` – `Button`, which latches a debounced falling edge
  until `consume()` is called.
- `ohmscope.app` – `AdcMode` (USB 4045 / battery 3630), `Reading`, and
  `Ohmmeter` with `toggle_mode`, `measure`, `step` and a `run` loop; and
  `main`, the command above.

## What it does not do

The package does not talk to hardware. There is no ADC reader, I2C bus,
GPIO interrupt or LED driver in it: `Ohmmeter` takes a function that returns
one ADC sample, `SSD1306` takes a transport object, `LedMatrix` takes a
callable that receives each 32-bit word, and `Button.on_edge` must be fed
edge events by the caller. The `ohmscope` command only simulates a single
cycle in memory.