# apps/ceremonies/domain/entities.py
from dataclasses import dataclass
from enum import Enum


class CeremonyType(str, Enum):
    PLANNING = 'planning'
    RETRO = 'retro'


class CeremonyScope(str, Enum):
    WEEKLY = 'weekly'
    QUARTERLY = 'quarterly'
    YEARLY = 'yearly'


@dataclass(frozen=True)
class CeremonyEntry:
    date: str  # YYYY-MM-DD
    type: CeremonyType
    scope: CeremonyScope
    content: str

    def to_dict(self) -> dict:
        return {
            'date': self.date,
            'type': self.type.value,
            'scope': self.scope.value,
            'content': self.content,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CeremonyEntry':
        return cls(
            date=data['date'],
            type=CeremonyType(data['type']),
            scope=CeremonyScope(data['scope']),
            content=data['content'],
        )
