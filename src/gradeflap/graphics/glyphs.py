"""3x5 pixel glyphs for labels drawn straight into world buffers."""

from typing import Dict, Tuple

from gradeflap.graphics.primitives import Buffer, Color, draw_bitmap

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5

GLYPHS: Dict[str, Tuple[str, ...]] = {
    "A": (".#.", "#.#", "###", "#.#", "#.#"),
    "B": ("##.", "#.#", "##.", "#.#", "##."),
    "C": (".##", "#..", "#..", "#..", ".##"),
    "D": ("##.", "#.#", "#.#", "#.#", "##."),
    "E": ("###", "#..", "##.", "#..", "###"),
    "F": ("###", "#..", "##.", "#..", "#.."),
    "$": (".##", "##.", ".#.", ".##", "##."),
    "+": ("...", ".#.", "###", ".#.", "..."),
    "-": ("...", "...", "###", "...", "..."),
    "0": ("###", "#.#", "#.#", "#.#", "###"),
    "1": (".#.", "##.", ".#.", ".#.", "###"),
    "2": ("##.", "..#", ".#.", "#..", "###"),
    "3": ("##.", "..#", ".#.", "..#", "##."),
    "4": ("#.#", "#.#", "###", "..#", "..#"),
    "5": ("###", "#..", "##.", "..#", "##."),
    "6": (".##", "#..", "###", "#.#", "###"),
    "7": ("###", "..#", ".#.", ".#.", ".#."),
    "8": ("###", "#.#", "###", "#.#", "###"),
    "9": ("###", "#.#", "###", "..#", "##."),
    " ": ("...", "...", "...", "...", "..."),
}


def text_size(text: str, scale: int = 1) -> Tuple[int, int]:
    """Pixel size of ``text`` with one column of spacing between glyphs."""
    if not text:
        return 0, 0
    width = (len(text) * (GLYPH_WIDTH + 1) - 1) * scale
    return width, GLYPH_HEIGHT * scale


def draw_label(
    buffer: Buffer,
    cx: float,
    cy: float,
    text: str,
    color: Color,
    scale: int = 2,
) -> None:
    """Draw ``text`` centred on ``(cx, cy)``. Unknown characters are skipped."""
    width, height = text_size(text, scale)
    x = int(round(cx - width / 2))
    y = int(round(cy - height / 2))
    for char in text.upper():
        rows = GLYPHS.get(char)
        if rows:
            draw_bitmap(buffer, x, y, rows, color, scale)
        x += (GLYPH_WIDTH + 1) * scale
