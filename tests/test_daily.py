from datetime import date, timedelta

from apps.core.dates import date_key, local_today, recent_dates, today_key
from apps.daily.domain.entities import MORNING_ROUTINE, DailyEntry, EveningCheck
from apps.daily.domain.streak import compute_streak
from apps.daily.repositories import DailyRepository


def _complete(day: str) -> DailyEntry:
    return DailyEntry(date=day, morning={item.id: True for item in MORNING_ROUTINE})


def _history(first: date, last: date) -> dict:
    entries = {}
    day = first
    while day <= last:
        entries[date_key(day)] = _complete(date_key(day))
        day += timedelta(days=1)
    return entries


def test_toggle_morning_creates_entry_lazily(store):
    repo = DailyRepository(store)

    entries = repo.toggle_morning('2025-06-05', 'movement')

    assert entries['2025-06-05'] == DailyEntry(date='2025-06-05', morning={'movement': True})


def test_toggle_morning_twice_flips_back(store):
    repo = DailyRepository(store)
    repo.toggle_morning('2025-06-05', 'learning')

    entries = repo.toggle_morning('2025-06-05', 'learning')

    assert entries['2025-06-05'].morning == {'learning': False}


def test_set_evening_overwrites_pair_and_keeps_morning(store):
    repo = DailyRepository(store)
    repo.toggle_morning('2025-06-05', 'movement')
    repo.set_evening('2025-06-05', 'gratitude', False, 'draft')

    entries = repo.set_evening('2025-06-05', 'gratitude', True, 'family, sun, coffee')

    entry = entries['2025-06-05']
    assert entry.morning == {'movement': True}
    assert entry.evening == {'gratitude': EveningCheck(done=True, note='family, sun, coffee')}


def test_one_entry_per_date(store):
    repo = DailyRepository(store)
    repo.toggle_morning('2025-06-05', 'movement')
    repo.set_evening('2025-06-05', 'reflection', True, '')
    repo.toggle_morning('2025-06-04', 'movement')

    assert sorted(repo.load()) == ['2025-06-04', '2025-06-05']


def test_entry_returns_unsaved_empty_entry(store):
    repo = DailyRepository(store)

    assert repo.entry('2025-01-01') == DailyEntry(date='2025-01-01')
    assert repo.load() == {}


def test_streak_of_empty_collection_is_zero(today):
    assert compute_streak({}, today) == 0


def test_streak_counts_five_consecutive_days(today):
    entries = _history(date(2025, 6, 1), today)

    assert compute_streak(entries, today) == 5


def test_streak_stops_at_gap(today):
    entries = _history(date(2025, 6, 1), today)
    del entries['2025-06-03']

    assert compute_streak(entries, today) == 2


def test_streak_is_zero_when_today_incomplete(today):
    entries = _history(date(2025, 5, 1), today)
    entries['2025-06-05'] = DailyEntry(date='2025-06-05', morning={'movement': True, 'learning': True})

    assert compute_streak(entries, today) == 0


def test_streak_is_zero_when_today_missing(today):
    entries = _history(date(2025, 5, 1), today - timedelta(days=1))

    assert compute_streak(entries, today) == 0


def test_streak_ignores_evening_routine(today):
    entries = {'2025-06-05': DailyEntry(
        date='2025-06-05',
        morning={item.id: True for item in MORNING_ROUTINE},
        evening={'reflection': EveningCheck(done=False, note='')},
    )}

    assert compute_streak(entries, today) == 1


def test_streak_spans_month_and_year_boundaries():
    today = date(2025, 1, 2)
    entries = _history(date(2024, 12, 30), today)

    assert compute_streak(entries, today) == 4


def test_streak_is_derived_from_repository_state(store, today):
    repo = DailyRepository(store)
    for day in ('2025-06-04', '2025-06-05'):
        for item in MORNING_ROUTINE:
            repo.toggle_morning(day, item.id)

    assert repo.streak(today) == 2

    repo.toggle_morning('2025-06-05', 'meeting')
    assert repo.streak(today) == 0


def test_recent_dates_newest_first(today):
    days = recent_dates(14, today=today)

    assert len(days) == 14
    assert days[0] == '2025-06-05'
    assert days[-1] == '2025-05-23'
    assert days == sorted(days, reverse=True)


def test_date_key_is_zero_padded():
    assert date_key(date(2025, 3, 7)) == '2025-03-07'


def test_today_key_follows_configured_time_zone(settings):
    settings.TIME_ZONE = 'Pacific/Kiritimati'

    assert local_today() == local_today('Pacific/Kiritimati')
    assert today_key() == date_key(local_today('Pacific/Kiritimati'))


def test_streak_over_long_unbroken_history(today):
    entries = _history(today - timedelta(days=4999), today)
    entries[date_key(today - timedelta(days=5000))] = DailyEntry(date=date_key(today - timedelta(days=5000)))

    assert compute_streak(entries, today) == 5000
