# apps/core/adapters/memory_store.py
from contextlib import contextmanager
from typing import Dict, Optional

from apps.core.ports.key_value_store import IKeyValueStore, KeyLockMixin


class InMemoryKeyValueStore(KeyLockMixin, IKeyValueStore):
    """Magazyn w pamięci procesu (testy, lekki host)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        super().__init__()
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    @contextmanager
    def locked(self, key: str):
        with self.thread_locked(key):
            yield
