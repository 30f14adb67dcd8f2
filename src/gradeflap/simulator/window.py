"""
Main game window using pygame.

Turns keyboard/mouse input into bus events, emits one TICK per frame and
presents the world buffer plus HUD, overlay and shop panel.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
import pygame
from numpy.typing import NDArray

from gradeflap.core.events import Event, EventBus, EventType, flap_event, tick_event
from gradeflap.game.entities import WorldSnapshot

logger = logging.getLogger(__name__)

SHOP_ROW_HEIGHT = 22


def visible_rows(count: int, selected: int, capacity: int) -> Tuple[int, int]:
    """Slice bounds of a list window that keeps ``selected`` in view."""
    if count <= capacity:
        return 0, count
    start = min(max(0, selected - capacity // 2), count - capacity)
    return start, start + capacity


@dataclass
class WindowConfig:
    """Game window configuration."""
    view_width: int = 480
    view_height: int = 640
    scale: float = 1.0
    title: str = "Grade Flap"
    fullscreen: bool = False
    fps: int = 60

    # Colors
    text_color: Tuple[int, int, int] = (255, 255, 255)
    shadow_color: Tuple[int, int, int] = (30, 30, 40)
    panel_color: Tuple[int, int, int, int] = (20, 25, 35, 230)
    accent_color: Tuple[int, int, int] = (255, 209, 102)
    muted_color: Tuple[int, int, int] = (150, 150, 170)

    @property
    def size(self) -> Tuple[int, int]:
        return int(self.view_width * self.scale), int(self.view_height * self.scale)


@dataclass
class ShopRow:
    """One catalog line in the shop panel."""
    name: str
    price: str
    status: str
    highlighted: bool = False


@dataclass
class ShopPanel:
    """What the shop panel shows this frame."""
    rows: List[ShopRow] = field(default_factory=list)
    coins: int = 0
    message: str = ""


class GameWindow:
    """
    Desktop window for the game.

    Keyboard Mapping:
        SPACE / UP / left click: Flap (starts a run when idle)
        B: Open/close shop
        LEFT / RIGHT: Browse shop
        RETURN: Buy or equip in shop
        M: Toggle sound
        ESC / Q: Quit
    """

    def __init__(self, config: Optional[WindowConfig] = None, event_bus: Optional[EventBus] = None):
        self.config = config or WindowConfig()
        self.event_bus = event_bus or EventBus()

        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._running = False
        self._frame_count = 0

        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None

        # Presented content, updated by the app each tick
        self._frame: Optional[NDArray[np.uint8]] = None
        self._snapshot: Optional[WorldSnapshot] = None
        self._shop: Optional[ShopPanel] = None

        logger.info("GameWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(self.config.size, flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont("DejaVu Sans", 22, bold=True)
        self._big_font = pygame.font.SysFont("DejaVu Sans", 30, bold=True)
        self._small_font = pygame.font.SysFont("DejaVu Sans", 16)

        logger.info(f"Pygame initialized: {self.config.size[0]}x{self.config.size[1]}")

    # Content setters

    def present(self, frame: NDArray[np.uint8], snapshot: WorldSnapshot) -> None:
        """Set the world buffer and snapshot to show on the next render."""
        self._frame = frame
        self._snapshot = snapshot

    def show_shop(self, panel: Optional[ShopPanel]) -> None:
        """Show the shop panel, or hide it with None."""
        self._shop = panel

    # Input

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self._shop is None:
                    self.event_bus.emit(flap_event(source="mouse"))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.stop()
        elif key == pygame.K_b:
            event_type = EventType.OPEN_SHOP if self._shop is None else EventType.CLOSE_SHOP
            self.event_bus.emit(Event(event_type, source="keyboard"))
        elif key == pygame.K_m:
            self.event_bus.emit(Event(EventType.TOGGLE_MUTE, source="keyboard"))
        elif self._shop is not None:
            if key == pygame.K_LEFT:
                self.event_bus.emit(Event(EventType.SHOP_PREV, source="keyboard"))
            elif key == pygame.K_RIGHT:
                self.event_bus.emit(Event(EventType.SHOP_NEXT, source="keyboard"))
            elif key == pygame.K_RETURN:
                self.event_bus.emit(Event(EventType.SHOP_CONFIRM, source="keyboard"))
        elif key in (pygame.K_SPACE, pygame.K_UP):
            self.event_bus.emit(flap_event(source="keyboard"))

    # Rendering

    def _render(self) -> None:
        """Render all UI elements."""
        if not self._screen:
            return

        self._screen.fill((0, 0, 0))
        self._render_world()
        self._render_hud()
        self._render_overlay()
        if self._shop is not None:
            self._render_shop()

        pygame.display.flip()

    def _render_world(self) -> None:
        if self._frame is None:
            return
        surface = pygame.surfarray.make_surface(self._frame.swapaxes(0, 1))
        if self.config.scale != 1.0:
            surface = pygame.transform.scale(surface, self.config.size)
        self._screen.blit(surface, (0, 0))

    def _text(self, font: pygame.font.Font, text: str, pos: Tuple[int, int],
              color: Tuple[int, int, int], center: bool = False) -> None:
        """Draw text with a 2px drop shadow."""
        for offset, c in (((2, 2), self.config.shadow_color), ((0, 0), color)):
            surface = font.render(text, True, c)
            rect = surface.get_rect()
            if center:
                rect.center = (pos[0] + offset[0], pos[1] + offset[1])
            else:
                rect.topleft = (pos[0] + offset[0], pos[1] + offset[1])
            self._screen.blit(surface, rect)

    def _render_hud(self) -> None:
        snap = self._snapshot
        if snap is None or not self._font:
            return
        width = self.config.size[0]
        self._text(self._font, f"Score: {snap.score}", (12, 10), self.config.text_color)
        self._text(self._small_font, f"High: {snap.high_score}", (12, 38), self.config.text_color)
        coins = f"Coins: {snap.coins}"
        coins_width, _ = self._small_font.size(coins)
        self._text(self._small_font, coins, (width - coins_width - 12, 12), self.config.accent_color)

    def _render_overlay(self) -> None:
        snap = self._snapshot
        if snap is None or snap.running or not snap.message or self._shop is not None:
            return
        width, height = self.config.size

        overlay = pygame.Surface((width, 120), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        self._screen.blit(overlay, (0, height // 2 - 60))

        self._text(self._font, snap.message, (width // 2, height // 2 - 18),
                   self.config.text_color, center=True)
        self._text(self._small_font, "B = Shop    M = Sound    Q = Quit",
                   (width // 2, height // 2 + 22), self.config.muted_color, center=True)

    def _render_shop(self) -> None:
        panel = self._shop
        width, height = self.config.size
        rect = pygame.Rect(20, 60, width - 40, height - 120)

        surf = pygame.Surface(rect.size, pygame.SRCALPHA)
        surf.fill(self.config.panel_color)
        self._screen.blit(surf, rect.topleft)
        pygame.draw.rect(self._screen, (60, 80, 100), rect, 1, border_radius=5)

        self._text(self._big_font, "SKIN SHOP", (rect.centerx, rect.y + 24),
                   self.config.accent_color, center=True)
        self._text(self._small_font, f"Coins: {panel.coins}", (rect.x + 14, rect.y + 48),
                   self.config.accent_color)

        top = rect.y + 76
        capacity = max(1, (rect.bottom - 50 - top) // SHOP_ROW_HEIGHT)
        selected = next((i for i, row in enumerate(panel.rows) if row.highlighted), 0)
        start, end = visible_rows(len(panel.rows), selected, capacity)

        y = top
        for row in panel.rows[start:end]:
            color = self.config.accent_color if row.highlighted else self.config.text_color
            marker = "> " if row.highlighted else "  "
            self._screen.blit(self._small_font.render(marker + row.name, True, color), (rect.x + 14, y))
            info = f"{row.price}  [{row.status}]"
            info_surf = self._small_font.render(info, True, self.config.muted_color)
            self._screen.blit(info_surf, (rect.right - info_surf.get_width() - 14, y))
            y += SHOP_ROW_HEIGHT

        hint = panel.message or "LEFT/RIGHT browse, ENTER buy/equip, B close"
        self._text(self._small_font, hint, (rect.centerx, rect.bottom - 20),
                   self.config.text_color, center=True)

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window loop started")

        while self._running:
            self._handle_events()

            if self._clock:
                delta = self._clock.get_time() / 1000.0
                self.event_bus.emit(tick_event(delta, self._frame_count))

            await self.event_bus.process_queue()

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Window closed")

    def stop(self) -> None:
        """Stop the window loop."""
        self._running = False
