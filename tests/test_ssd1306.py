import pytest

from ohmscope.font import glyph
from ohmscope.ssd1306 import Command, SSD1306


class RecordingBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
def display(bus):
    return SSD1306(bus)


def lit_pixels(ssd):
    return {(x, y) for x in range(ssd.width) for y in range(ssd.height) if ssd.get_pixel(x, y)}


def test_command_wire_format(display):
    display.command(Command.SET_CONTRAST)
    assert display.transport.writes == [(0x3C, bytes([0x80, 0x81]))]


def test_command_rejects_out_of_range(display):
    with pytest.raises(ValueError):
        display.command(256)


def test_send_data_sets_window_then_sends_buffer(display, bus):
    display.send_data()
    commands = [data[1] for _, data in bus.writes[:-1]]
    assert commands == [0x21, 0, display.width - 1, 0x22, 0, display.pages - 1]
    address, frame = bus.writes[-1]
    assert address == 0x3C
    assert frame[0] == 0x40
    assert len(frame) == display.pages * display.width + 1


def test_config_switches_display_off_then_on(display, bus):
    display.config()
    commands = [data[1] for _, data in bus.writes]
    assert commands[0] == 0xAE
    assert commands[-1] == 0xAF
    assert all(data[0] == 0x80 for _, data in bus.writes)
    mux = commands.index(Command.SET_MUX_RATIO)
    assert commands[mux + 1] == display.height - 1


def test_pixel_round_trip(display):
    display.pixel(10, 20, True)
    assert display.get_pixel(10, 20) is True
    assert lit_pixels(display) == {(10, 20)}
    display.pixel(10, 20, False)
    assert lit_pixels(display) == set()


def test_out_of_range_pixel_is_ignored(display):
    before = bytes(display.buffer)
    display.pixel(display.width, 0, True)
    display.pixel(0, display.height, True)
    assert bytes(display.buffer) == before
    assert display.get_pixel(-1, 0) is False


def test_fill_preserves_control_byte(display):
    display.fill(True)
    assert display.buffer[0] == 0x40
    assert len(lit_pixels(display)) == display.width * display.height
    display.fill(False)
    assert lit_pixels(display) == set()


def test_rect_outline(display):
    display.rect(2, 3, 5, 4, True, False)
    assert display.get_pixel(3, 2)
    assert display.get_pixel(7, 5)
    assert not display.get_pixel(5, 3)
    expected = {(x, y) for x in range(3, 8) for y in range(2, 6)
                if x in (3, 7) or y in (2, 5)}
    assert lit_pixels(display) == expected


def test_rect_filled(display):
    display.rect(2, 3, 5, 4, True, True)
    assert lit_pixels(display) == {(x, y) for x in range(3, 8) for y in range(2, 6)}


def test_line_diagonal_and_reverse(display):
    display.line(0, 0, 5, 5, True)
    assert lit_pixels(display) == {(i, i) for i in range(6)}
    display.line(5, 5, 0, 0, False)
    assert lit_pixels(display) == set()


def test_line_horizontal_matches_hline(bus):
    a = SSD1306(bus)
    b = SSD1306(bus)
    a.line(4, 9, 30, 9, True)
    b.hline(4, 30, 9, True)
    assert a.buffer == b.buffer


def test_vline(display):
    display.vline(7, 3, 10, True)
    assert lit_pixels(display) == {(7, y) for y in range(3, 11)}


def test_draw_char_matches_glyph(display):
    display.draw_char("A", 16, 8)
    columns = glyph("A")
    for i in range(8):
        for j in range(8):
            assert display.get_pixel(16 + i, 8 + j) == bool(columns[i] & (1 << j))


def test_draw_string_wraps_to_next_row(bus):
    text = "0123456789ABCDEFG"
    ssd = SSD1306(bus)
    ssd.draw_string(text, 0, 0)
    reference = SSD1306(bus)
    reference.draw_char(text[15], 0, 8)
    for i in range(8):
        for j in range(8):
            assert ssd.get_pixel(i, 8 + j) == reference.get_pixel(i, 8 + j)
    assert not any(ssd.get_pixel(x, y) for x in range(120, 128) for y in range(8))


def test_draw_string_stops_at_bottom(display):
    display.draw_string("X" * 200, 0, 48)
    assert not any(display.get_pixel(x, y) for x in range(display.width) for y in range(56, 64))
    assert any(display.get_pixel(x, y) for x in range(8) for y in range(48, 56))