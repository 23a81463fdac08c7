# apps/core/models.py
from django.db import models


class StoredValue(models.Model):
    """Jeden wiersz = jeden klucz magazynu. Wartość to surowy tekst JSON."""
    key = models.CharField(max_length=100, unique=True)
    # NULL = klucz zarezerwowany (np. przez blokadę), ale bez wartości
    value = models.TextField(null=True, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['key']

    def __str__(self):
        return self.key
