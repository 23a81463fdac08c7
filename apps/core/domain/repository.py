# apps/core/domain/repository.py
import json
import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from django.conf import settings

from apps.core.exceptions import StorageReadError, StorageWriteError, UnknownStorageKey
from apps.core.keys import StorageKey
from apps.core.ports.key_value_store import IKeyValueStore
from apps.core.stores import get_default_store

logger = logging.getLogger(__name__)

C = TypeVar('C')

ON_CORRUPT_EMPTY = 'empty'
ON_CORRUPT_RAISE = 'raise'


class Repository(Generic[C]):
    """
    Typowane opakowanie jednego klucza magazynu.

    - load(): odczyt + dekodowanie; brak klucza -> pusta kolekcja,
      uszkodzone dane -> wg polityki (pusta kolekcja + ostrzeżenie albo StorageReadError)
    - mutate(fn): odczyt, transformacja i zapis pod blokadą klucza (write-through)

    Podklasy definiują key, empty(), decode() i encode().
    """
    key: StorageKey = None

    def __init__(self, store: Optional[IKeyValueStore] = None, on_corrupt: Optional[str] = None):
        if not isinstance(self.key, StorageKey):
            raise UnknownStorageKey(str(self.key), "repository key must be a StorageKey")
        self.store = store or get_default_store()
        self.on_corrupt = on_corrupt or getattr(settings, 'BEYOND_ON_CORRUPT', ON_CORRUPT_EMPTY)

    # --- do nadpisania ---

    def empty(self) -> C:
        raise NotImplementedError

    def decode(self, data: Any) -> C:
        raise NotImplementedError

    def encode(self, collection: C) -> Any:
        raise NotImplementedError

    # --- kontrakt ---

    def load(self) -> C:
        return self._read()

    def mutate(self, fn: Callable[[C], C]) -> C:
        with self.store.locked(self.key.value):
            current = self._read()
            updated = fn(current)
            self._write(updated)
        return updated

    # --- wnętrze ---

    def _read(self) -> C:
        raw = self.store.get(self.key.value)
        if raw is None:
            return self.empty()
        try:
            return self.decode(json.loads(raw))
        except (ValueError, TypeError, KeyError, AttributeError, OverflowError, RecursionError) as e:
            if self.on_corrupt == ON_CORRUPT_RAISE:
                raise StorageReadError(self.key.value, str(e)) from e
            logger.warning("Corrupt value under %s, treating as empty: %s", self.key.value, e)
            return self.empty()

    def _write(self, collection: C) -> None:
        try:
            raw = json.dumps(self.encode(collection), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error("Cannot serialize value for %s: %s", self.key.value, e)
            raise StorageWriteError(self.key.value, f"serialization failed: {e}") from e

        try:
            self.store.set(self.key.value, raw)
        except Exception as e:
            # Zapis odrzucony przez magazyn (np. brak miejsca, błąd bazy)
            logger.error("Write to %s failed: %s", self.key.value, e)
            raise StorageWriteError(self.key.value, str(e)) from e

        logger.debug("Committed %s (%d bytes)", self.key.value, len(raw))


class ListRepository(Repository[list]):
    """Repozytorium listy encji (kolejność zapisu = kolejność przechowywania)."""
    entity_class = None

    def empty(self) -> list:
        return []

    def decode(self, data: Any) -> list:
        if not isinstance(data, list):
            raise TypeError(f"expected list, got {type(data).__name__}")
        return [self.entity_class.from_dict(item) for item in data]

    def encode(self, collection: list) -> Any:
        return [item.to_dict() for item in collection]

    def prepend(self, item) -> list:
        return self.mutate(lambda items: [item] + items)
