"""Graphics module for Grade Flap rendering."""

from gradeflap.graphics.renderer import Renderer, Palette
from gradeflap.graphics.primitives import (
    draw_rect,
    draw_circle,
    draw_ellipse,
    fill,
    new_buffer,
)
from gradeflap.graphics.glyphs import draw_label

__all__ = [
    "Renderer",
    "Palette",
    "draw_rect",
    "draw_circle",
    "draw_ellipse",
    "fill",
    "new_buffer",
    "draw_label",
]
