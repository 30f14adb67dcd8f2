"""
Desktop entry point.

Wires settings, persistence, the game loop, renderer, audio and the
pygame window together over the event bus.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from gradeflap.audio.engine import AudioEngine
from gradeflap.config.settings import Settings, get_settings
from gradeflap.core.events import Event, EventBus, EventType
from gradeflap.game.ledger import Ledger
from gradeflap.game.loop import GameLoop
from gradeflap.game.profiles import GameProfile
from gradeflap.game.shop import Shop
from gradeflap.graphics.renderer import Renderer
from gradeflap.simulator.window import GameWindow, ShopPanel, ShopRow, WindowConfig
from gradeflap.storage.json_store import JsonFileStore

logger = logging.getLogger(__name__)


def setup_logging(log_file: Path, debug: bool = False) -> None:
    """Configure logging with console and file output."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(formatter)

    # File handler - truncate on each run for fresh logs
    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Per-spawn debug lines are noisy
    logging.getLogger("gradeflap.game.spawner").setLevel(logging.DEBUG if debug else logging.INFO)

    logging.info(f"Logging to file: {log_file}")


class GradeFlapApp:
    """Main application integrating all systems."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.event_bus = EventBus()

        # Persistence and bookkeeping
        self.store = JsonFileStore(self.settings.storage.data_path)
        self.ledger = Ledger(self.store)
        self.shop = Shop(self.ledger)
        self.shop.apply_score_unlocks()

        # Game core
        self.profile = GameProfile.from_settings(self.settings)
        self.loop = GameLoop(self.profile, self.ledger, event_bus=self.event_bus)
        self.renderer = Renderer(self.profile.view_width, self.profile.view_height)

        # Audio
        self.audio = AudioEngine(volume=self.settings.audio.volume)
        if self.settings.audio.enabled:
            self.audio.init()
            self.audio.attach(self.event_bus)

        # Window
        display = self.settings.display
        self.window = GameWindow(
            config=WindowConfig(
                view_width=display.view_width,
                view_height=display.view_height,
                scale=display.scale,
                title=self.settings.window_title,
                fullscreen=display.fullscreen,
                fps=display.fps,
            ),
            event_bus=self.event_bus,
        )

        # Shop panel state
        self._shop_open = False
        self._shop_index = 0
        self._shop_message = ""

        self._setup_event_handlers()
        logger.info(f"GradeFlapApp initialized with profile '{self.profile.name}'")

    def _setup_event_handlers(self) -> None:
        bus = self.event_bus
        bus.subscribe(EventType.TICK, self._on_tick)
        bus.subscribe(EventType.FLAP, self._on_flap)
        bus.subscribe(EventType.OPEN_SHOP, self._on_open_shop)
        bus.subscribe(EventType.CLOSE_SHOP, self._on_close_shop)
        bus.subscribe(EventType.SHOP_PREV, lambda e: self._move_shop_cursor(-1))
        bus.subscribe(EventType.SHOP_NEXT, lambda e: self._move_shop_cursor(1))
        bus.subscribe(EventType.SHOP_CONFIRM, self._on_shop_confirm)
        bus.subscribe(EventType.TOGGLE_MUTE, lambda e: self.audio.toggle_mute())
        bus.subscribe(EventType.RUN_ENDED, self._on_run_ended)
        bus.subscribe(EventType.SHUTDOWN, self._on_shutdown)

    def _on_tick(self, event: Event) -> None:
        """Handle frame tick - update and render."""
        if not self._shop_open:
            self.loop.tick()

        snapshot = self.loop.snapshot()
        frame = self.renderer.render(snapshot)
        self.window.present(frame, snapshot)

    def _on_flap(self, event: Event) -> None:
        if not self._shop_open:
            self.loop.flap()

    def _on_run_ended(self, event: Event) -> None:
        self.shop.apply_score_unlocks()

    def _on_shutdown(self, event: Event) -> None:
        logger.info("Window closed, saving progress")
        self.ledger.save()

    # Shop

    def _on_open_shop(self, event: Event) -> None:
        if self.loop.running:
            logger.info("Shop is only available between runs")
            return
        self.shop.apply_score_unlocks()
        self._shop_open = True
        self._shop_message = ""
        self._refresh_shop()

    def _on_close_shop(self, event: Event) -> None:
        self._shop_open = False
        self.window.show_shop(None)

    def _move_shop_cursor(self, step: int) -> None:
        if not self._shop_open:
            return
        self._shop_index = (self._shop_index + step) % len(self.shop.catalog)
        self._shop_message = ""
        self._refresh_shop()

    def _on_shop_confirm(self, event: Event) -> None:
        if not self._shop_open:
            return
        skin = self.shop.catalog[self._shop_index]
        result = self.shop.activate(skin.id)
        self._shop_message = result.message
        self.event_bus.emit(Event(
            EventType.SHOP_ACTION,
            data={"skin": skin.id, "success": result.success},
            source="shop",
        ))
        self._refresh_shop()

    def _refresh_shop(self) -> None:
        rows = [
            ShopRow(
                name=skin.name,
                price=self.shop.label(skin),
                status=self.shop.status(skin).name.replace("_", " ").title(),
                highlighted=(i == self._shop_index),
            )
            for i, skin in enumerate(self.shop.catalog)
        ]
        self.window.show_shop(ShopPanel(rows=rows, coins=self.ledger.coins, message=self._shop_message))

    async def run(self) -> None:
        """Run the game."""
        logger.info("Starting Grade Flap...")
        try:
            await self.window.run()
        finally:
            self.audio.cleanup()


def main() -> None:
    """Main entry point."""
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.log_file, debug=settings.debug)

    logger.info("=" * 50)
    logger.info("Grade Flap Starting")
    logger.info("=" * 50)
    logger.info("Controls:")
    logger.info("  SPACE/UP/Click - Flap (start when idle)")
    logger.info("  B              - Skin shop")
    logger.info("  M              - Toggle sound")
    logger.info("  Q/ESC          - Quit")

    try:
        asyncio.run(GradeFlapApp(settings).run())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.exception(f"Game error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
