# apps/goals/repositories.py
from dataclasses import replace
from typing import List

from apps.core.domain.repository import ListRepository
from apps.core.keys import StorageKey
from apps.goals.domain.entities import Goal, new_id


class GoalRepository(ListRepository):
    """Cele roczne. Nie usuwamy - tylko dodawanie i przełączanie 'done'."""
    key = StorageKey.GOALS
    entity_class = Goal

    def add(self, year: int, title: str, why: str = "", how: str = "") -> List[Goal]:
        title = title.strip()
        if not title:
            return self.load()
        # Zawsze nowe ID i done=False, niezależnie od wejścia
        goal = Goal(id=new_id(), year=int(year), title=title, why=why.strip(), how=how.strip(), done=False)
        return self.prepend(goal)

    def toggle(self, goal_id: str) -> List[Goal]:
        # Nieznane ID -> kolekcja bez zmian (no-op)
        return self.mutate(
            lambda goals: [replace(g, done=not g.done) if g.id == goal_id else g for g in goals]
        )

    def for_year(self, year: int) -> List[Goal]:
        return [g for g in self.load() if g.year == int(year)]
