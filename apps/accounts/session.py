# apps/accounts/session.py
import logging
import uuid
from typing import Any, Optional

from apps.core.domain.repository import Repository
from apps.core.keys import StorageKey
from apps.core.ports.key_value_store import IKeyValueStore
from apps.accounts.domain.entities import User
from apps.accounts.domain.invites import parse_invite

logger = logging.getLogger(__name__)

DEFAULT_NAME = 'Guest'


class SessionRepository(Repository[Optional[User]]):
    """Pojedyncza wartość (nie kolekcja): zalogowany użytkownik albo None."""
    key = StorageKey.USER

    def empty(self) -> Optional[User]:
        return None

    def decode(self, data: Any) -> Optional[User]:
        return User.from_dict(data) if data is not None else None

    def encode(self, user: Optional[User]) -> Any:
        return user.to_dict() if user is not None else None


class SessionManager:
    """
    Jedyny właściciel sesji. Stan odczytany przy starcie, podmieniany
    w całości przy logowaniu, czyszczony przy wylogowaniu.
    Komponenty potrzebujące tożsamości dostają `current` jawnie.
    """

    def __init__(self, store: Optional[IKeyValueStore] = None):
        self.repository = SessionRepository(store)
        self._current = self.repository.load()

    @property
    def current(self) -> Optional[User]:
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    def login_with_invite(self, invite: Optional[str], name: str = "") -> User:
        role, cohort = parse_invite(invite)
        user = User(id=str(uuid.uuid4()), name=name.strip() or DEFAULT_NAME, role=role, cohort=cohort)
        self._current = self.repository.mutate(lambda _: user)
        logger.info("Session started for %s (%s, cohort %s)", user.name, user.role.value, cohort)
        return user

    def logout(self) -> None:
        self._current = self.repository.mutate(lambda _: None)
        logger.info("Session cleared")
