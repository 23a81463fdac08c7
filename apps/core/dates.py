# apps/core/dates.py
from datetime import date, datetime, timedelta
from typing import List, Optional

import pytz
from django.conf import settings

DATE_KEY_FORMAT = '%Y-%m-%d'


def local_today(tz_name: Optional[str] = None) -> date:
    """Dzisiejsza data kalendarzowa w strefie użytkownika (settings.TIME_ZONE)."""
    tz = pytz.timezone(tz_name or settings.TIME_ZONE)
    return datetime.now(tz).date()


def date_key(day: date) -> str:
    # YYYY-MM-DD: porządek leksykograficny == chronologiczny
    return day.strftime(DATE_KEY_FORMAT)


def today_key(today: Optional[date] = None) -> str:
    return date_key(today or local_today())


def recent_dates(days: int = 14, today: Optional[date] = None) -> List[str]:
    """Klucze ostatnich `days` dni, od najnowszego (dzisiaj) wstecz."""
    today = today or local_today()
    return [date_key(today - timedelta(days=i)) for i in range(days)]
