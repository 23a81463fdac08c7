# apps/daily/domain/entities.py
from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class RoutineItem:
    id: str
    label: str
    hint: str = ""


# Katalogi rutyn - konfiguracja, nie dane użytkownika
MORNING_ROUTINE: Tuple[RoutineItem, ...] = (
    RoutineItem('movement', 'Movement', '5–20 mins. Just get the blood flowing.'),
    RoutineItem('learning', 'Learning', 'Read / listen / take notes.'),
    RoutineItem('meeting', 'Meeting with myself', 'Plan the day in 5 mins.'),
)

EVENING_ROUTINE: Tuple[RoutineItem, ...] = (
    RoutineItem('reflection', 'End-of-Day Reflection', 'What worked? What will I change?'),
    RoutineItem('gratitude', 'Gratitude', "3 things I'm grateful for."),
)


@dataclass(frozen=True)
class EveningCheck:
    done: bool = False
    note: str = ""

    def to_dict(self) -> dict:
        return {'done': self.done, 'note': self.note}

    @classmethod
    def from_dict(cls, data: dict) -> 'EveningCheck':
        return cls(done=bool(data['done']), note=str(data.get('note', '')))


@dataclass(frozen=True)
class DailyEntry:
    date: str  # YYYY-MM-DD
    morning: Dict[str, bool] = field(default_factory=dict)
    evening: Dict[str, EveningCheck] = field(default_factory=dict)

    def is_morning_complete(self) -> bool:
        """Czy wszystkie punkty porannej rutyny są odhaczone."""
        return all(self.morning.get(item.id) for item in MORNING_ROUTINE)

    def to_dict(self) -> dict:
        return {
            'date': self.date,
            'morning': dict(self.morning),
            'evening': {k: v.to_dict() for k, v in self.evening.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'DailyEntry':
        return cls(
            date=data['date'],
            morning={k: bool(v) for k, v in data.get('morning', {}).items()},
            evening={k: EveningCheck.from_dict(v) for k, v in data.get('evening', {}).items()},
        )
