from apps.journal.domain.coach import COACH_PROMPTS, coach_reply, text_hash


def test_same_text_same_prompt():
    first = coach_reply("hello")

    assert all(coach_reply("hello") == first for _ in range(100))


def test_known_selections():
    # Ten sam algorytm co String.hashCode w Javie
    assert text_hash("hello") == 99162322
    assert coach_reply("hello") == COACH_PROMPTS[2]
    assert coach_reply("hellp") == COACH_PROMPTS[3]


def test_empty_text_selects_first_prompt():
    assert text_hash("") == 0
    assert coach_reply("") == COACH_PROMPTS[0]


def test_hash_wraps_like_signed_32_bit():
    assert text_hash("polygenelubricants") == -2 ** 31
    assert coach_reply("polygenelubricants") == COACH_PROMPTS[3]


def test_long_text_stays_in_range():
    h = text_hash("I keep postponing the gym. " * 500)

    assert -2 ** 31 <= h < 2 ** 31
    assert coach_reply("I keep postponing the gym. " * 500) in COACH_PROMPTS


def test_astral_characters_count_as_surrogate_pairs():
    # U+1F600 -> D83D DE00
    assert text_hash("\U0001F600") == 0xD83D * 31 + 0xDE00
