# apps/ceremonies/domain/prompts.py
from typing import Tuple

from apps.ceremonies.domain.entities import CeremonyScope, CeremonyType

# Pytania pomocnicze wyświetlane nad formularzem ceremonii
PROMPT_HINTS = {
    (CeremonyScope.WEEKLY, CeremonyType.PLANNING): (
        "What 1–3 moves will advance my yearly goals this week?",
        "What must be true by Sunday to call this week a win?",
        "What will I deliberately say 'no' to?",
    ),
    (CeremonyScope.WEEKLY, CeremonyType.RETRO): (
        "What worked? What didn't?",
        "What will I do differently next week?",
        "What did I learn about myself?",
    ),
    (CeremonyScope.QUARTERLY, CeremonyType.PLANNING): (
        "Which yearly goal gets the most leverage this quarter?",
        "What milestones will prove progress in 13 weeks?",
        "What risks should I pre-empt?",
    ),
    (CeremonyScope.QUARTERLY, CeremonyType.RETRO): (
        "Which bets paid off? Which did not, and why?",
        "What will I double down on for next quarter?",
        "What did I unlearn?",
    ),
    (CeremonyScope.YEARLY, CeremonyType.PLANNING): (
        "My 3–5 tangible goals for the year are…",
        "Why do these matter now?",
        "What capabilities and relationships will I build?",
    ),
    (CeremonyScope.YEARLY, CeremonyType.RETRO): (
        "What am I proud of this year?",
        "What will I leave behind?",
        "What identity shift is emerging?",
    ),
}

# Podpowiedź harmonogramu dla każdej skali
SCHEDULE_HINTS = {
    CeremonyScope.WEEKLY: "Scheduled every Sunday",
    CeremonyScope.QUARTERLY: "Every 13 weeks",
    CeremonyScope.YEARLY: "Year is enough: 2025, 2026…",
}


def prompt_hints(scope: CeremonyScope, type: CeremonyType) -> Tuple[str, ...]:
    return PROMPT_HINTS[(CeremonyScope(scope), CeremonyType(type))]


def schedule_hint(scope: CeremonyScope) -> str:
    return SCHEDULE_HINTS[CeremonyScope(scope)]
