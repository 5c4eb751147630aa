"""5x7 bitmap font and text layout used by the raster backend."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

GLYPH_COLUMNS = 5
GLYPH_ROWS = 7
GLYPH_ADVANCE = 6


@dataclass(frozen=True, slots=True)
class TextLayout:
    """Resolved text run geometry relative to the anchor point."""

    text: str
    pixel: float
    origin_x: float
    origin_y: float
    width: float
    height: float


def glyph_rows(ch: str) -> tuple[str, ...]:
    """Return the bitmap rows for ``ch``, falling back to upper case then ``?``."""
    rows = BITMAP_FONT_5X7.get(ch)
    if rows is None:
        rows = BITMAP_FONT_5X7.get(ch.upper(), BITMAP_FONT_5X7["?"])
    return rows


def layout_text(
    text: str,
    x: float,
    y: float,
    *,
    font_size: float,
    align: str = "left",
    baseline: str = "top",
    max_width: float | None = None,
) -> TextLayout:
    """Scale, truncate and anchor one line of text."""
    pixel = float(max(1, int(round(max(6.0, float(font_size)) / 8.0))))
    advance = GLYPH_ADVANCE * pixel
    if max_width is not None and max_width >= 0.0:
        max_chars = int((float(max_width) + pixel) // advance)
        text = text[: max(0, max_chars)]
    width = max(0.0, len(text) * advance - pixel)
    height = GLYPH_ROWS * pixel
    origin_x = float(x)
    origin_y = float(y)
    horizontal = align.strip().lower()
    if horizontal == "center":
        origin_x -= width * 0.5
    elif horizontal in {"right", "end"}:
        origin_x -= width
    vertical = baseline.strip().lower()
    if vertical == "middle":
        origin_y -= height * 0.5
    elif vertical in {"bottom", "alphabetic", "ideographic"}:
        origin_y -= height
    return TextLayout(
        text=text, pixel=pixel, origin_x=origin_x, origin_y=origin_y, width=width, height=height
    )


def iter_glyph_runs(layout: TextLayout) -> Iterator[tuple[float, float, float, float]]:
    """Yield ``(x, y, w, h)`` rectangles covering the lit pixels of ``layout``."""
    pixel = layout.pixel
    cursor_x = layout.origin_x
    for ch in layout.text:
        for row_idx, row_bits in enumerate(glyph_rows(ch)):
            py = layout.origin_y + (float(row_idx) * pixel)
            col_idx = 0
            while col_idx < len(row_bits):
                if row_bits[col_idx] != "1":
                    col_idx += 1
                    continue
                run_start = col_idx
                while col_idx < len(row_bits) and row_bits[col_idx] == "1":
                    col_idx += 1
                run_len = col_idx - run_start
                yield (cursor_x + float(run_start) * pixel, py, float(run_len) * pixel, pixel)
        cursor_x += GLYPH_ADVANCE * pixel


BITMAP_FONT_5X7: dict[str, tuple[str, ...]] = {
    " ": ("00000", "00000", "00000", "00000", "00000", "00000", "00000"),
    "!": ("00100", "00100", "00100", "00100", "00100", "00000", "00100"),
    "'": ("00100", "00100", "00000", "00000", "00000", "00000", "00000"),
    "(": ("00010", "00100", "01000", "01000", "01000", "00100", "00010"),
    ")": ("01000", "00100", "00010", "00010", "00010", "00100", "01000"),
    "+": ("00000", "00100", "00100", "11111", "00100", "00100", "00000"),
    ",": ("00000", "00000", "00000", "00000", "00110", "00100", "01000"),
    "-": ("00000", "00000", "00000", "11111", "00000", "00000", "00000"),
    ".": ("00000", "00000", "00000", "00000", "00000", "00110", "00110"),
    "/": ("00001", "00010", "00100", "01000", "10000", "00000", "00000"),
    ":": ("00000", "00110", "00110", "00000", "00110", "00110", "00000"),
    "<": ("00010", "00100", "01000", "10000", "01000", "00100", "00010"),
    "=": ("00000", "11111", "00000", "11111", "00000", "00000", "00000"),
    ">": ("01000", "00100", "00010", "00001", "00010", "00100", "01000"),
    "?": ("01110", "10001", "00001", "00010", "00100", "00000", "00100"),
    "[": ("01110", "01000", "01000", "01000", "01000", "01000", "01110"),
    "]": ("01110", "00010", "00010", "00010", "00010", "00010", "01110"),
    "_": ("00000", "00000", "00000", "00000", "00000", "00000", "11111"),
    "#": ("01010", "11111", "01010", "01010", "11111", "01010", "01010"),
    "0": ("01110", "10001", "10011", "10101", "11001", "10001", "01110"),
    "1": ("00100", "01100", "00100", "00100", "00100", "00100", "01110"),
    "2": ("01110", "10001", "00001", "00010", "00100", "01000", "11111"),
    "3": ("11110", "00001", "00001", "00110", "00001", "00001", "11110"),
    "4": ("00010", "00110", "01010", "10010", "11111", "00010", "00010"),
    "5": ("11111", "10000", "10000", "11110", "00001", "00001", "11110"),
    "6": ("01110", "10000", "10000", "11110", "10001", "10001", "01110"),
    "7": ("11111", "00001", "00010", "00100", "01000", "01000", "01000"),
    "8": ("01110", "10001", "10001", "01110", "10001", "10001", "01110"),
    "9": ("01110", "10001", "10001", "01111", "00001", "00001", "01110"),
    "A": ("01110", "10001", "10001", "11111", "10001", "10001", "10001"),
    "B": ("11110", "10001", "10001", "11110", "10001", "10001", "11110"),
    "C": ("01110", "10001", "10000", "10000", "10000", "10001", "01110"),
    "D": ("11100", "10010", "10001", "10001", "10001", "10010", "11100"),
    "E": ("11111", "10000", "10000", "11110", "10000", "10000", "11111"),
    "F": ("11111", "10000", "10000", "11110", "10000", "10000", "10000"),
    "G": ("01110", "10001", "10000", "10000", "10011", "10001", "01110"),
    "H": ("10001", "10001", "10001", "11111", "10001", "10001", "10001"),
    "I": ("01110", "00100", "00100", "00100", "00100", "00100", "01110"),
    "J": ("00001", "00001", "00001", "00001", "10001", "10001", "01110"),
    "K": ("10001", "10010", "10100", "11000", "10100", "10010", "10001"),
    "L": ("10000", "10000", "10000", "10000", "10000", "10000", "11111"),
    "M": ("10001", "11011", "10101", "10101", "10001", "10001", "10001"),
    "N": ("10001", "10001", "11001", "10101", "10011", "10001", "10001"),
    "O": ("01110", "10001", "10001", "10001", "10001", "10001", "01110"),
    "P": ("11110", "10001", "10001", "11110", "10000", "10000", "10000"),
    "Q": ("01110", "10001", "10001", "10001", "10101", "10010", "01101"),
    "R": ("11110", "10001", "10001", "11110", "10100", "10010", "10001"),
    "S": ("01111", "10000", "10000", "01110", "00001", "00001", "11110"),
    "T": ("11111", "00100", "00100", "00100", "00100", "00100", "00100"),
    "U": ("10001", "10001", "10001", "10001", "10001", "10001", "01110"),
    "V": ("10001", "10001", "10001", "10001", "10001", "01010", "00100"),
    "W": ("10001", "10001", "10001", "10101", "10101", "10101", "01010"),
    "X": ("10001", "10001", "01010", "00100", "01010", "10001", "10001"),
    "Y": ("10001", "10001", "01010", "00100", "00100", "00100", "00100"),
    "Z": ("11111", "00001", "00010", "00100", "01000", "10000", "11111"),
    "|": ("00100", "00100", "00100", "00100", "00100", "00100", "00100"),
    "*": ("00000", "10101", "01110", "11111", "01110", "10101", "00000"),
    "%": ("11001", "11010", "00010", "00100", "01000", "01011", "10011"),
    "✎": ("00011", "00111", "01110", "11100", "11000", "10000", "00000"),
}


__all__ = [
    "BITMAP_FONT_5X7",
    "GLYPH_ADVANCE",
    "GLYPH_COLUMNS",
    "GLYPH_ROWS",
    "TextLayout",
    "glyph_rows",
    "iter_glyph_runs",
    "layout_text",
]
