# apps/cohorts/domain/entities.py
from dataclasses import dataclass


@dataclass(frozen=True)
class CohortUser:
    """Użytkownik podglądu w panelu admina (dane przykładowe)."""
    id: str
    name: str
    cohort: str
    last_active: str  # YYYY-MM-DD

    def to_dict(self) -> dict:
        # lastActive - nazwa pola w zapisanym formacie
        return {'id': self.id, 'name': self.name, 'cohort': self.cohort, 'lastActive': self.last_active}

    @classmethod
    def from_dict(cls, data: dict) -> 'CohortUser':
        return cls(id=data['id'], name=data['name'], cohort=data['cohort'], last_active=data['lastActive'])
