# apps/ceremonies/repositories.py
from typing import Any, List

from apps.core.domain.repository import ListRepository
from apps.core.keys import StorageKey
from apps.ceremonies.domain.entities import CeremonyEntry, CeremonyScope


class CeremonyRepository(ListRepository):
    """Notatki planowania / retro. Tylko dopisywanie, najnowsze na początku."""
    key = StorageKey.CEREMONIES
    entity_class = CeremonyEntry

    def add(self, entry: CeremonyEntry) -> List[CeremonyEntry]:
        content = entry.content.strip()
        if not content:
            return self.load()
        return self.prepend(CeremonyEntry(
            date=entry.date, type=entry.type, scope=entry.scope, content=content
        ))

    def for_scope(self, scope: CeremonyScope) -> List[CeremonyEntry]:
        scope = CeremonyScope(scope)
        return [e for e in self.load() if e.scope == scope]


class BucketlistRepository(ListRepository):
    """Lista marzeń (dodatek do widoku kwartalnego) - zwykłe napisy."""
    key = StorageKey.BUCKETLIST

    def decode(self, data: Any) -> List[str]:
        if not isinstance(data, list):
            raise TypeError(f"expected list, got {type(data).__name__}")
        return [str(item) for item in data]

    def encode(self, collection: List[str]) -> Any:
        return list(collection)

    def add(self, text: str) -> List[str]:
        text = text.strip()
        if not text:
            return self.load()
        return self.prepend(text)
