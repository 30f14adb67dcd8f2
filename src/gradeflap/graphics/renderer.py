"""World renderer: paints a :class:`WorldSnapshot` into a numpy buffer."""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import numpy as np
from numpy.typing import NDArray

from gradeflap.game.entities import ObstacleView, PickupView, PlayerView, WorldSnapshot
from gradeflap.game.shop import SKINS, Skin
from gradeflap.graphics.glyphs import draw_label
from gradeflap.graphics.primitives import (
    Color,
    draw_circle,
    draw_ellipse,
    draw_rect,
    fill,
    new_buffer,
    rotate_point,
)


@dataclass(frozen=True)
class Palette:
    """Scene colors."""

    sky: Color = (112, 197, 206)
    ground: Color = (127, 191, 85)
    ground_edge: Color = (96, 150, 60)
    pipe: Color = (30, 143, 74)
    pipe_cap: Color = (20, 103, 51)
    good_pickup: Color = (255, 209, 102)
    bad_pickup: Color = (217, 83, 79)
    label: Color = (255, 255, 255)
    eye: Color = (20, 20, 20)


CAP_HEIGHT = 8
CAP_OVERHANG = 4


class Renderer:
    """Stateless drawing of world snapshots.

    The renderer owns only its output buffer; it reads the snapshot and
    never touches game state.
    """

    def __init__(
        self,
        width: int,
        height: int,
        palette: Optional[Palette] = None,
        skins: Iterable[Skin] = SKINS,
    ):
        self.width = width
        self.height = height
        self.palette = palette or Palette()
        self.skins: Dict[str, Skin] = {skin.id: skin for skin in skins}
        self.buffer: NDArray[np.uint8] = new_buffer(width, height, self.palette.sky)

    def render(self, snapshot: WorldSnapshot) -> NDArray[np.uint8]:
        """Draw one frame and return the (height, width, 3) buffer."""
        width, height = snapshot.view_size
        if (width, height) != (self.width, self.height):
            self.width, self.height = width, height
            self.buffer = new_buffer(width, height)

        buffer = self.buffer
        fill(buffer, self.palette.sky)
        self._draw_ground(snapshot.ground_y)

        for obstacle in snapshot.obstacles:
            self._draw_obstacle(obstacle, snapshot.ground_y)
        for pickup in snapshot.pickups:
            self._draw_pickup(pickup)
        self._draw_player(snapshot.player)

        return buffer

    def _draw_ground(self, ground_y: int) -> None:
        draw_rect(self.buffer, 0, ground_y, self.width, self.height - ground_y, self.palette.ground)
        draw_rect(self.buffer, 0, ground_y, self.width, 3, self.palette.ground_edge)

    def _draw_obstacle(self, obstacle: ObstacleView, ground_y: int) -> None:
        p = self.palette
        gap_bottom = obstacle.gap_top + obstacle.gap_height

        # Upper and lower walls
        draw_rect(self.buffer, obstacle.x, 0, obstacle.width, obstacle.gap_top, p.pipe)
        draw_rect(self.buffer, obstacle.x, gap_bottom, obstacle.width, ground_y - gap_bottom, p.pipe)

        # Caps framing the gap
        cap_x = obstacle.x - CAP_OVERHANG
        cap_w = obstacle.width + 2 * CAP_OVERHANG
        draw_rect(self.buffer, cap_x, obstacle.gap_top - CAP_HEIGHT, cap_w, CAP_HEIGHT, p.pipe_cap)
        draw_rect(self.buffer, cap_x, gap_bottom, cap_w, CAP_HEIGHT, p.pipe_cap)

    def _draw_pickup(self, pickup: PickupView) -> None:
        p = self.palette
        color = p.good_pickup if pickup.value > 0 else p.bad_pickup
        draw_circle(self.buffer, pickup.x, pickup.y, pickup.radius, color)
        draw_circle(self.buffer, pickup.x, pickup.y, pickup.radius, p.label, filled=False)
        draw_label(self.buffer, pickup.x, pickup.y, pickup.label, p.label, scale=3)

    def _draw_player(self, player: PlayerView) -> None:
        skin = self.skins.get(player.skin) or next(iter(self.skins.values()))
        angle = player.tilt
        cx, cy = player.x, player.y
        half_w, half_h = player.width / 2, player.height / 2

        # Body
        draw_ellipse(self.buffer, cx, cy, half_w * 0.8, half_h * 0.75, skin.body, angle)

        # Head toward the direction of travel
        hx, hy = rotate_point(half_w * 0.55, -half_h * 0.2, angle)
        draw_circle(self.buffer, cx + hx, cy + hy, half_h * 0.55, skin.body)

        # Horns
        for offset in (-0.55, 0.15):
            ox, oy = rotate_point(half_w * (0.55 + offset * 0.3), -half_h * 0.8, angle)
            draw_ellipse(self.buffer, cx + ox, cy + oy, 3.5, 7, skin.horns, angle + offset)

        # Eye
        ex, ey = rotate_point(half_w * 0.7, -half_h * 0.3, angle)
        draw_circle(self.buffer, cx + ex, cy + ey, 2.5, self.palette.eye)
