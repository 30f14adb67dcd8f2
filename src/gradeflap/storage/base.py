"""Key-value storage port used by the ledger."""

from typing import Dict, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """String-keyed store for persisted game values.

    Implementations must never raise from ``set`` or ``update``;
    persistence is fire-and-forget from the game's point of view.
    """

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def update(self, values: Mapping[str, str]) -> None:
        ...


class MemoryStore:
    """In-process store, used by tests and when no data path is configured."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.writes += 1

    def update(self, values: Mapping[str, str]) -> None:
        self._data.update(values)
        self.writes += 1

    def as_dict(self) -> Dict[str, str]:
        return dict(self._data)
