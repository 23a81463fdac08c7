# apps/goals/domain/entities.py
import uuid
from dataclasses import dataclass, field


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Goal:
    year: int
    title: str
    why: str = ""
    how: str = ""
    done: bool = False
    id: str = field(default_factory=new_id)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'year': self.year,
            'title': self.title,
            'why': self.why,
            'how': self.how,
            'done': self.done,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Goal':
        return cls(
            id=data['id'],
            year=int(data['year']),
            title=data['title'],
            why=data.get('why', ''),
            how=data.get('how', ''),
            done=bool(data.get('done', False)),
        )
