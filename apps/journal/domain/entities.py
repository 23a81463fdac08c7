# apps/journal/domain/entities.py
from dataclasses import dataclass


@dataclass(frozen=True)
class JournalEntry:
    id: str
    date: str  # YYYY-MM-DD
    text: str
    reply: str = ""  # liczone raz, przy tworzeniu

    def to_dict(self) -> dict:
        return {'id': self.id, 'date': self.date, 'text': self.text, 'reply': self.reply}

    @classmethod
    def from_dict(cls, data: dict) -> 'JournalEntry':
        return cls(
            id=data['id'],
            date=data['date'],
            text=data['text'],
            reply=data.get('reply') or "",
        )
