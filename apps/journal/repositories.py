# apps/journal/repositories.py
import uuid
from datetime import date
from typing import List, Optional

from apps.core.dates import today_key
from apps.core.domain.repository import ListRepository
from apps.core.keys import StorageKey
from apps.journal.domain.coach import coach_reply
from apps.journal.domain.entities import JournalEntry


class JournalRepository(ListRepository):
    key = StorageKey.JOURNAL
    entity_class = JournalEntry

    def add(self, text: str, today: Optional[date] = None) -> List[JournalEntry]:
        text = text.strip()
        if not text:
            return self.load()

        entry = JournalEntry(
            id=str(uuid.uuid4()),
            date=today_key(today),
            text=text,
            reply=coach_reply(text),
        )
        return self.prepend(entry)
