"""Basic drawing primitives on numpy RGB buffers."""

import math
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int, color: Color = (0, 0, 0)) -> Buffer:
    """Allocate a (height, width, 3) buffer filled with ``color``."""
    buffer = np.zeros((height, width, 3), dtype=np.uint8)
    buffer[:, :] = color
    return buffer


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw an axis-aligned rectangle, clipped to the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    h, w = buffer.shape[:2]

    x1 = max(0, min(int(round(x)), w))
    y1 = max(0, min(int(round(y)), h))
    x2 = max(0, min(int(round(x + width)), w))
    y2 = max(0, min(int(round(y + height)), h))
    if x1 >= x2 or y1 >= y2:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
        return

    t = max(1, thickness)
    buffer[y1:min(y1 + t, y2), x1:x2] = color
    buffer[max(y2 - t, y1):y2, x1:x2] = color
    buffer[y1:y2, x1:min(x1 + t, x2)] = color
    buffer[y1:y2, max(x2 - t, x1):x2] = color


def _window(buffer: Buffer, cx: float, cy: float, reach: float):
    """Clipped bounding window around a point, plus its coordinate grids."""
    h, w = buffer.shape[:2]
    x1 = max(0, int(math.floor(cx - reach)))
    y1 = max(0, int(math.floor(cy - reach)))
    x2 = min(w, int(math.ceil(cx + reach)) + 1)
    y2 = min(h, int(math.ceil(cy + reach)) + 1)
    if x1 >= x2 or y1 >= y2:
        return None
    ys, xs = np.ogrid[y1:y2, x1:x2]
    return (x1, y1, x2, y2), xs - cx, ys - cy


def draw_circle(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
    filled: bool = True,
) -> None:
    """Draw a circle using a distance mask.

    Args:
        buffer: Target numpy array (height, width, 3)
        cx: Center x coordinate
        cy: Center y coordinate
        radius: Circle radius in pixels
        color: RGB color tuple
        filled: If True, fill circle; if False, draw a 1px ring
    """
    win = _window(buffer, cx, cy, radius)
    if win is None:
        return
    (x1, y1, x2, y2), dx, dy = win

    dist_sq = dx ** 2 + dy ** 2
    if filled:
        mask = dist_sq <= radius ** 2
    else:
        mask = (dist_sq <= radius ** 2) & (dist_sq >= (radius - 1) ** 2)
    buffer[y1:y2, x1:x2][mask] = color


def draw_ellipse(
    buffer: Buffer,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    color: Color,
    angle: float = 0.0,
) -> None:
    """Draw a filled ellipse rotated by ``angle`` radians (clockwise on screen)."""
    if rx <= 0 or ry <= 0:
        return
    win = _window(buffer, cx, cy, max(rx, ry))
    if win is None:
        return
    (x1, y1, x2, y2), dx, dy = win

    cos_a, sin_a = math.cos(angle), math.sin(angle)
    # Rotate sample points into the ellipse's local frame
    u = dx * cos_a + dy * sin_a
    v = -dx * sin_a + dy * cos_a
    mask = (u / rx) ** 2 + (v / ry) ** 2 <= 1.0
    buffer[y1:y2, x1:x2][mask] = color


def rotate_point(x: float, y: float, angle: float) -> Tuple[float, float]:
    """Rotate an offset around the origin by ``angle`` radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a


def draw_bitmap(
    buffer: Buffer,
    x: int,
    y: int,
    rows: Tuple[str, ...],
    color: Color,
    scale: int = 1,
) -> None:
    """Stamp a bitmap given as strings of '#' (on) and '.' (off)."""
    for row_index, row in enumerate(rows):
        for col_index, cell in enumerate(row):
            if cell == "#":
                draw_rect(
                    buffer,
                    x + col_index * scale,
                    y + row_index * scale,
                    scale,
                    scale,
                    color,
                )
