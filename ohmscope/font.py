"""8x8 bitmap font for printable ASCII, one byte per column, LSB at the top."""

from __future__ import annotations

_GLYPHS = (
    "0000000000000000", "0000005F5F000000", "0007070007070000", "147F7F147F7F1400",
    "242E2A6B6B3A1200", "466630180C666200", "307A4F5D377A4800", "0004070300000000",
    "00001C3E63410000", "000041633E1C0000", "082A3E1C1C3E2A08", "0008083E3E080800",
    "000080E060000000", "0008080808080800", "0000006060000000", "6030180C06030100",
    "3E7F594D477F3E00", "0040427F7F404000", "727B4949494F4600", "41414949497F3600",
    "1E1E10107F7F1000", "27674545457D3900", "3E7F494949793000", "01016171190F0700",
    "367F4949497F3600", "064F4949497F3E00", "0000006666000000", "000080E666000000",
    "00081C3663410000", "0014141414141400", "00004163361C0800", "000203595D070200",
    "3E7F415D5D5F5E00", "7C7E1311137E7C00", "7F7F4949497F3600", "3E7F414141632200",
    "7F7F4141633E1C00", "7F7F494949414100", "7F7F090909010100", "3E7F414151733200",
    "7F7F0808087F7F00", "0041417F7F414100", "20604040407F3F00", "7F7F081C36634100",
    "7F7F404040404000", "7F7F0E1C0E7F7F00", "7F7F060C187F7F00", "3E7F4141417F3E00",
    "7F7F0909090F0600", "3E7F417161FFBE00", "7F7F0919396F4600", "266F4949497B3200",
    "0101017F7F010101", "7F7F4040407F7F00", "1F3F6060603F1F00", "3F7F6030607F3F00",
    "63771C081C776300", "474F6838180F0700", "416171594D474300", "00007F7F41410000",
    "0103060C18306000", "000041417F7F0000", "080C0603060C0800", "8080808080808080",
    "0000000307040000", "20745454547C7800", "7F7F484848783000", "387C4444446C2800",
    "30784848487F7F00", "387C5454545C1800", "00487E7F49030200", "98BCA4A4A4FC7C00",
    "7F7F0404047C7800", "0000447D7D400000", "40C0808080FD7D00", "7F7F10183C644000",
    "0000417F7F400000", "7C7C18781C7C7800", "7C7C0404047C7800", "387C4444447C3800",
    "FCFC2424243C1800", "183C242424FCFC00", "7C7C0404040C0800", "485C545454742400",
    "0004043F7F444400", "3C7C4040407C7C00", "1C3C6060603C1C00", "3C7C6030607C3C00",
    "446C3810386C4400", "9CBCA0A0A0FC7C00", "446474545C4C4400", "0008083E77414100",
    "0000007777000000", "004141773E080800", "0203010302030100",
)

FONT: bytes = bytes.fromhex("".join(_GLYPHS))
GLYPH_WIDTH = 8
GLYPH_HEIGHT = 8

_FIRST = ord(" ")
_LAST = ord("~")


def glyph(char: str) -> bytes:
    """Eight column bytes for ``char``; characters outside ' '..'~' render as a space."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    code = ord(char)
    if not _FIRST <= code <= _LAST:
        code = _FIRST
    start = (code - _FIRST) * GLYPH_WIDTH
    return FONT[start:start + GLYPH_WIDTH]