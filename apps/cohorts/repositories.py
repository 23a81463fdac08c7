# apps/cohorts/repositories.py
import uuid
from datetime import date
from typing import Any, List, Optional

from django.conf import settings

from apps.accounts.domain.entities import Role
from apps.accounts.domain.invites import create_invite
from apps.core.dates import today_key
from apps.core.domain.repository import ListRepository
from apps.core.keys import StorageKey
from apps.core.ports.key_value_store import IKeyValueStore
from apps.cohorts.domain.entities import CohortUser


class CohortRepository(ListRepository):
    """Zbiór nazw kohort, przechowywany jako lista bez duplikatów (kolejność dodania)."""
    key = StorageKey.COHORTS

    def decode(self, data: Any) -> List[str]:
        if not isinstance(data, list):
            raise TypeError(f"expected list, got {type(data).__name__}")
        return list(dict.fromkeys(str(name) for name in data))

    def encode(self, collection: List[str]) -> Any:
        return list(collection)

    def add(self, name: str) -> List[str]:
        return self.mutate(lambda names: names if name in names else names + [name])


class CohortUserRepository(ListRepository):
    key = StorageKey.COHORT_USERS
    entity_class = CohortUser


class AdminRepository:
    """Panel admina: kohorty + użytkownicy podglądu + zaproszenia."""

    def __init__(self, store: Optional[IKeyValueStore] = None):
        self.cohorts = CohortRepository(store)
        self.users = CohortUserRepository(store)

    def add_cohort(self, name: str) -> List[str]:
        name = name.strip()
        if not name:
            return self.cohorts.load()
        return self.cohorts.add(name)

    def ensure_default_cohorts(self) -> List[str]:
        """Wstawia domyślne kohorty (Alpha, Beta), jeśli zbiór jest pusty."""
        defaults = list(getattr(settings, 'BEYOND_DEFAULT_COHORTS', ['Alpha', 'Beta']))
        return self.cohorts.mutate(lambda names: names or list(dict.fromkeys(defaults)))

    def seed_user(self, name: str, cohort: str, today: Optional[date] = None) -> List[CohortUser]:
        user = CohortUser(id=str(uuid.uuid4()), name=name, cohort=cohort, last_active=today_key(today))
        return self.users.mutate(lambda users: users + [user])

    def create_invite(self, role: Role, cohort: str) -> str:
        return create_invite(role, cohort)
