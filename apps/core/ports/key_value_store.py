# apps/core/ports/key_value_store.py
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Iterator, Optional


class IKeyValueStore(ABC):
    """
    Trwały magazyn klucz -> tekst JSON.
    Surowy tekst (a nie obiekt) pozwala wykryć uszkodzone dane przy odczycie.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Zwraca surową wartość albo None, jeśli klucza nie ma."""
        pass

    @abstractmethod
    def set(self, key: str, raw: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    @abstractmethod
    def locked(self, key: str):
        """Context manager trzymający wyłączną blokadę klucza (read-modify-write)."""
        pass


class KeyLockMixin:
    """Jedna blokada na klucz, tworzona leniwie."""

    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def key_lock(self, key: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    @contextmanager
    def thread_locked(self, key: str) -> Iterator[None]:
        with self.key_lock(key):
            yield
