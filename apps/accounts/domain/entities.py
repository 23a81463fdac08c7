# apps/accounts/domain/entities.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Role(str, Enum):
    ADMIN = 'admin'
    MEMBER = 'member'


@dataclass(frozen=True)
class User:
    """Aktywna sesja. Rola to wygoda podglądu, NIE uprawnienie."""
    id: str
    name: str
    role: Role = Role.MEMBER
    cohort: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> dict:
        return {'id': self.id, 'name': self.name, 'role': self.role.value, 'cohort': self.cohort}

    @classmethod
    def from_dict(cls, data: dict) -> 'User':
        return cls(
            id=data['id'],
            name=data['name'],
            role=Role(data['role']),
            cohort=data.get('cohort'),
        )
