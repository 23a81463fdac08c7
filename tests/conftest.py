from datetime import date

import pytest

from apps.core.adapters.memory_store import InMemoryKeyValueStore


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def today():
    return date(2025, 6, 5)


class FailingStore(InMemoryKeyValueStore):
    """Magazyn, który odrzuca każdy zapis (np. przekroczony limit)."""

    def set(self, key, raw):
        raise OSError("quota exceeded")


@pytest.fixture
def failing_store():
    return FailingStore()
