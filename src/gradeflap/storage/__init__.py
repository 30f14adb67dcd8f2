"""Persistence adapters for Grade Flap."""

from .base import KeyValueStore, MemoryStore
from .json_store import JsonFileStore

__all__ = ["KeyValueStore", "MemoryStore", "JsonFileStore"]
