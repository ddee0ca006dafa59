"""Frame buffer and command driver for SSD1306 OLED controllers over I2C."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from ohmscope.font import GLYPH_HEIGHT, GLYPH_WIDTH, glyph

WIDTH = 128
HEIGHT = 64
DEFAULT_ADDRESS = 0x3C

_CONTROL_COMMAND = 0x80
_CONTROL_DATA = 0x40


class Command(IntEnum):
    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class Transport(Protocol):
    """An I2C bus able to write a block of bytes to a device address."""

    def write(self, address: int, data: bytes) -> None: ...


class SSD1306:
    """Display with an in-memory frame buffer in vertical addressing mode.

    Pixels outside the display area are ignored.
    """

    def __init__(
        self,
        transport: Transport,
        width: int = WIDTH,
        height: int = HEIGHT,
        address: int = DEFAULT_ADDRESS,
        external_vcc: bool = False,
    ) -> None:
        self.transport = transport
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self.buffer = bytearray(self.pages * width + 1)
        self.buffer[0] = _CONTROL_DATA

    def config(self) -> None:
        """Send the power-up configuration sequence and switch the display on."""
        sequence = (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, self.height - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        )
        for byte in sequence:
            self.command(byte)

    def command(self, command: int) -> None:
        """Send a single command byte."""
        if not 0 <= command <= 0xFF:
            raise ValueError(f"command byte out of range: {command}")
        self.transport.write(self.address, bytes((_CONTROL_COMMAND, command)))

    def send_data(self) -> None:
        """Transfer the whole frame buffer to the display."""
        for byte in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(byte)
        self.transport.write(self.address, bytes(self.buffer))

    def _locate(self, x: int, y: int) -> tuple[int, int] | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return (y >> 3) + x * self.pages + 1, 1 << (y & 0b111)

    def pixel(self, x: int, y: int, value: bool) -> None:
        location = self._locate(x, y)
        if location is None:
            return
        index, mask = location
        if value:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        location = self._locate(x, y)
        if location is None:
            return False
        index, mask = location
        return bool(self.buffer[index] & mask)

    def fill(self, value: bool) -> None:
        byte = 0xFF if value else 0x00
        self.buffer[1:] = bytes([byte]) * (len(self.buffer) - 1)

    def rect(self, top: int, left: int, width: int, height: int, value: bool, fill: bool) -> None:
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value: bool) -> None:
        """Bresenham line including both end points."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0: int, x1: int, y: int, value: bool) -> None:
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value: bool) -> None:
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, char: str, x: int, y: int) -> None:
        for i, column in enumerate(glyph(char)):
            for j in range(GLYPH_HEIGHT):
                self.pixel(x + i, y + j, bool(column & (1 << j)))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw text, wrapping to the next row and stopping at the bottom edge."""
        for char in text:
            self.draw_char(char, x, y)
            x += GLYPH_WIDTH
            if x + GLYPH_WIDTH >= self.width:
                x = 0
                y += GLYPH_HEIGHT
            if y + GLYPH_HEIGHT >= self.height:
                break