"""Audio system for Grade Flap - synthesized chiptune effects."""

from .engine import AudioEngine

__all__ = ["AudioEngine"]
