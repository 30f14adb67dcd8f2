"""Persistent key-value storage using a JSON file."""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Key-value store backed by a single JSON object file.

    Values are kept as the strings the caller hands in, so the on-disk
    layout mirrors a browser ``localStorage``. Every write goes to a
    sibling temp file that replaces the save file in one step, so an
    interrupted write leaves the previous save intact.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: Dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        """Load data from file."""
        if not self.path.exists():
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception as e:
            logger.error(f"Failed to load save file {self.path}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Ignoring save file {self.path}: not a JSON object")
            return

        # Hand-edited saves may hold raw JSON values instead of encoded strings
        self._data = {
            str(k): v if isinstance(v, str) else json.dumps(v)
            for k, v in data.items()
        }
        logger.info(f"Loaded {len(self._data)} saved values from {self.path}")

    def _save(self) -> None:
        """Save data to file."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except Exception as e:
            logger.error(f"Failed to save {self.path}: {e}")

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def update(self, values: Mapping[str, str]) -> None:
        """Set several keys with a single file write."""
        self._data.update(values)
        self._save()
