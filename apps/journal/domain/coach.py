# apps/journal/domain/coach.py
"""
Coach - deterministyczna odpowiedź na wpis w dzienniku.

Hash tekstu (h = h*31 + kod znaku, przepełnienie jak w 32-bitowym int ze znakiem)
wybiera jedno z pięciu pytań. Ten sam tekst -> zawsze to samo pytanie.
"""
from typing import Tuple

COACH_PROMPTS: Tuple[str, ...] = (
    "If this goes well, what will be the first small sign you notice?",
    "Name one obstacle you can remove in the next 24 hours.",
    "On a scale of 1–10, how important is this? What would move it +1?",
    "What would 'good enough' look like this week?",
    "Who can you ask for help, and what exactly will you ask?",
)

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def text_hash(text: str) -> int:
    """Rolling hash po jednostkach UTF-16 (znaki spoza BMP liczą się jako para)."""
    data = text.encode('utf-16-le')
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + unit)
    return h


def coach_reply(text: str) -> str:
    return COACH_PROMPTS[abs(text_hash(text)) % len(COACH_PROMPTS)]
