# apps/core/adapters/orm_store.py
from contextlib import contextmanager
from typing import Optional

from django.db import transaction

from apps.core.models import StoredValue
from apps.core.ports.key_value_store import IKeyValueStore, KeyLockMixin


class DjangoKeyValueStore(KeyLockMixin, IKeyValueStore):
    """Magazyn oparty o model StoredValue (baza Django)."""

    def get(self, key: str) -> Optional[str]:
        return StoredValue.objects.filter(key=key).values_list('value', flat=True).first()

    def set(self, key: str, raw: str) -> None:
        StoredValue.objects.update_or_create(key=key, defaults={'value': raw})

    def delete(self, key: str) -> None:
        StoredValue.objects.filter(key=key).delete()

    @contextmanager
    def locked(self, key: str):
        # Blokada wątku (SQLite ignoruje select_for_update) + blokada wiersza w bazie
        with self.thread_locked(key), transaction.atomic():
            StoredValue.objects.get_or_create(key=key)
            StoredValue.objects.select_for_update().get(key=key)
            yield
