# apps/daily/repositories.py
from datetime import date
from typing import Any, Dict, Optional

from apps.core.dates import local_today
from apps.core.domain.repository import Repository
from apps.core.keys import StorageKey
from apps.daily.domain.entities import DailyEntry, EveningCheck
from apps.daily.domain.streak import compute_streak


class DailyRepository(Repository[Dict[str, DailyEntry]]):
    """Wpisy dzienne: mapa data -> DailyEntry (jeden wpis na datę)."""
    key = StorageKey.DAILY

    def empty(self) -> Dict[str, DailyEntry]:
        return {}

    def decode(self, data: Any) -> Dict[str, DailyEntry]:
        if not isinstance(data, dict):
            raise TypeError(f"expected mapping, got {type(data).__name__}")
        return {day: DailyEntry.from_dict(raw) for day, raw in data.items()}

    def encode(self, collection: Dict[str, DailyEntry]) -> Any:
        return {day: entry.to_dict() for day, entry in collection.items()}

    def entry(self, day: str) -> DailyEntry:
        """Wpis dla daty albo pusty (niezapisany) wpis."""
        return self.load().get(day) or DailyEntry(date=day)

    def toggle_morning(self, day: str, item_id: str) -> Dict[str, DailyEntry]:
        def apply(entries):
            e = entries.get(day) or DailyEntry(date=day)
            morning = {**e.morning, item_id: not e.morning.get(item_id, False)}
            return {**entries, day: DailyEntry(date=day, morning=morning, evening=e.evening)}

        return self.mutate(apply)

    def set_evening(self, day: str, item_id: str, done: bool, note: str) -> Dict[str, DailyEntry]:
        def apply(entries):
            e = entries.get(day) or DailyEntry(date=day)
            evening = {**e.evening, item_id: EveningCheck(done=done, note=note)}
            return {**entries, day: DailyEntry(date=day, morning=e.morning, evening=evening)}

        return self.mutate(apply)

    def streak(self, today: Optional[date] = None) -> int:
        return compute_streak(self.load(), today or local_today())
