# apps/daily/domain/streak.py
from datetime import date, timedelta
from typing import Mapping, Optional

from apps.core.dates import date_key, local_today
from apps.daily.domain.entities import DailyEntry


def compute_streak(entries: Mapping[str, DailyEntry], today: Optional[date] = None) -> int:
    """
    Liczba kolejnych dni z pełną poranną rutyną, kończąca się dzisiaj (włącznie).

    Idziemy dzień po dniu wstecz od dzisiaj. Brak wpisu albo niepełna
    rutyna kończy serię. Wieczór nie ma znaczenia.
    """
    if not entries:
        return 0

    day = today or local_today()
    streak = 0
    while True:
        entry = entries.get(date_key(day))
        if entry is None or not entry.is_morning_complete():
            break
        streak += 1
        day -= timedelta(days=1)
    return streak
