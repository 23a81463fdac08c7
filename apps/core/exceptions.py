# apps/core/exceptions.py


class StorageError(Exception):
    """Bazowy błąd warstwy przechowywania."""

    def __init__(self, key: str, message: str = ""):
        self.key = key
        super().__init__(f"{key}: {message}" if message else key)


class StorageReadError(StorageError):
    """Wartość pod kluczem nie daje się zdekodować (polityka 'raise')."""


class StorageWriteError(StorageError):
    """Zapis się nie powiódł - mutacja NIE została utrwalona."""


class UnknownStorageKey(StorageError):
    pass
