# apps/core/keys.py
from enum import Enum


class StorageKey(str, Enum):
    """Stałe klucze w magazynie klucz-wartość. Nie zmieniać między wersjami."""
    USER = 'beyond:user'
    DAILY = 'beyond:daily'
    CEREMONIES = 'beyond:ceremonies'
    GOALS = 'beyond:goals'
    JOURNAL = 'beyond:journal'
    COHORTS = 'beyond:cohorts'
    COHORT_USERS = 'beyond:cohortUsers'
    BUCKETLIST = 'beyond:bucketlist'
