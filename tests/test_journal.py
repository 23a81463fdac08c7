import json

from apps.journal.domain.coach import coach_reply
from apps.journal.repositories import JournalRepository


def test_add_stores_reply_once(store, today):
    repo = JournalRepository(store)

    entries = repo.add("  I skipped my run again  ", today=today)

    entry = entries[0]
    assert entry.text == "I skipped my run again"
    assert entry.date == '2025-06-05'
    assert entry.reply == coach_reply("I skipped my run again")
    assert entry.id


def test_reply_is_read_back_not_recomputed(store, today):
    store.set('beyond:journal', json.dumps([
        {'id': '1', 'date': '2025-06-01', 'text': 'hello', 'reply': 'custom reply'}
    ]))

    assert JournalRepository(store).load()[0].reply == 'custom reply'


def test_newest_entry_first(store, today):
    repo = JournalRepository(store)
    repo.add("first", today=today)

    assert [e.text for e in repo.add("second", today=today)] == ["second", "first"]


def test_blank_text_is_ignored(store):
    assert JournalRepository(store).add("   ") == []
