"""
Grade Flap audio engine - chiptune sound effects.

All sounds are synthesized at startup from simple waveforms, so the game
ships without audio assets.
"""

import array
import logging
import math
import random
from typing import Dict, Optional

import pygame

from gradeflap.core.events import Event, EventBus, EventType

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def square(t: float, freq: float) -> float:
    """Square wave oscillator."""
    return 1 if (t * freq) % 1 < 0.5 else -1


def triangle(t: float, freq: float) -> float:
    """Triangle wave oscillator."""
    p = (t * freq) % 1
    return 4 * abs(p - 0.5) - 1


def sine(t: float, freq: float) -> float:
    """Sine wave oscillator."""
    return math.sin(2 * math.pi * freq * t)


def noise() -> float:
    """White noise generator."""
    return random.random() * 2 - 1


class AudioEngine:
    """Sound effects for flaps, points, pickups, crashes and purchases."""

    def __init__(self, volume: float = 0.6):
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._volume = volume
        self._muted = False

    @property
    def available(self) -> bool:
        return self._initialized

    def init(self) -> bool:
        """Initialize the mixer and generate all sounds."""
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 1024)
            pygame.mixer.init()
            pygame.mixer.set_num_channels(8)
        except pygame.error as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False

        self._initialized = True
        self._generate_all_sounds()
        logger.info(f"Audio engine initialized with {len(self._sounds)} sounds")
        return True

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples (auto-converted to stereo)."""
        stereo = array.array('h')
        for s in samples:
            stereo.append(s)
            stereo.append(s)
        return pygame.mixer.Sound(buffer=stereo)

    def _generate_all_sounds(self) -> None:
        self._gen_flap()
        self._gen_score()
        self._gen_pickup_good()
        self._gen_pickup_bad()
        self._gen_crash()
        self._gen_purchase()
        self._gen_error()

    def _gen_flap(self) -> None:
        """Short rising chirp."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.08)):
            t = i / SAMPLE_RATE
            freq = 300 + t * 4000
            env = max(0, 1 - t * 12)
            val = triangle(t, freq) * 0.35
            samples.append(int(val * env * 32767))
        self._sounds["flap"] = self._create_sound(samples)

    def _gen_score(self) -> None:
        """Two-tone blip for passing an obstacle."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.16)):
            t = i / SAMPLE_RATE
            freq = 880 if t < 0.08 else 1175
            env = max(0, 1 - (t % 0.08) * 12)
            val = square(t, freq) * 0.2
            samples.append(int(val * env * 32767))
        self._sounds["score"] = self._create_sound(samples)

    def _gen_pickup_good(self) -> None:
        """Bright arpeggio for a positive grade."""
        samples = array.array('h')
        notes = [523, 659, 784, 1047]
        step = 0.05
        for i in range(int(SAMPLE_RATE * step * len(notes))):
            t = i / SAMPLE_RATE
            freq = notes[min(int(t / step), len(notes) - 1)]
            env = max(0, 1 - (t % step) * 10)
            val = square(t, freq) * 0.2 + sine(t, freq * 2) * 0.1
            samples.append(int(val * env * 32767))
        self._sounds["pickup_good"] = self._create_sound(samples)

    def _gen_pickup_bad(self) -> None:
        """Falling buzz for a negative grade."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.25)):
            t = i / SAMPLE_RATE
            freq = 400 - t * 1000
            env = max(0, 1 - t * 4)
            val = square(t, max(80, freq)) * 0.25
            samples.append(int(val * env * 32767))
        self._sounds["pickup_bad"] = self._create_sound(samples)

    def _gen_crash(self) -> None:
        """Noise burst with a low thud."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.4)):
            t = i / SAMPLE_RATE
            env = max(0, 1 - t * 2.5)
            val = noise() * 0.3 + sine(t, 70) * 0.4
            samples.append(int(max(-1, min(1, val)) * env * 32767))
        self._sounds["crash"] = self._create_sound(samples)

    def _gen_purchase(self) -> None:
        """Coin-register jingle."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.3)):
            t = i / SAMPLE_RATE
            freq = 988 if t < 0.1 else 1319
            env = max(0, 1 - t * 3.3)
            val = square(t, freq) * 0.25
            samples.append(int(val * env * 32767))
        self._sounds["purchase"] = self._create_sound(samples)

    def _gen_error(self) -> None:
        """Error buzz."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.2)):
            t = i / SAMPLE_RATE
            env = max(0, 1 - t * 5)
            val = square(t, 110) * 0.25
            samples.append(int(val * env * 32767))
        self._sounds["error"] = self._create_sound(samples)

    def play(self, sound_name: str, volume: float = 1.0) -> Optional[pygame.mixer.Channel]:
        """Play a sound effect."""
        if not self._initialized or self._muted:
            return None

        sound = self._sounds.get(sound_name)
        if not sound:
            logger.warning(f"Sound not found: {sound_name}")
            return None

        sound.set_volume(volume * self._volume)
        return sound.play()

    def attach(self, event_bus: EventBus) -> None:
        """Play sounds in response to game events."""
        event_bus.subscribe(EventType.FLAP, lambda e: self.play("flap"))
        event_bus.subscribe(EventType.SCORE_CHANGED, lambda e: self.play("score"))
        event_bus.subscribe(EventType.PICKUP_COLLECTED, self._on_pickup)
        event_bus.subscribe(EventType.RUN_ENDED, lambda e: self.play("crash"))
        event_bus.subscribe(EventType.SHOP_ACTION, self._on_shop_result)

    def _on_pickup(self, event: Event) -> None:
        if event.data.get("value", 0) > 0:
            self.play("pickup_good")
        else:
            self.play("pickup_bad")

    def _on_shop_result(self, event: Event) -> None:
        self.play("purchase" if event.data.get("success") else "error")

    def toggle_mute(self) -> bool:
        """Toggle mute; returns the new muted state."""
        self._muted = not self._muted
        if self._muted and self._initialized:
            pygame.mixer.stop()
        return self._muted

    def cleanup(self) -> None:
        """Cleanup audio resources."""
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            logger.info("Audio engine cleaned up")
