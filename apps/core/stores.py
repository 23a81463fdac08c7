# apps/core/stores.py
from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from apps.core.ports.key_value_store import IKeyValueStore


@lru_cache(maxsize=None)
def get_default_store() -> IKeyValueStore:
    """Instancja magazynu wskazana w settings.BEYOND_STORE (jedna na proces)."""
    store_class = import_string(settings.BEYOND_STORE)
    return store_class()
