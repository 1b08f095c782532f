from dataclasses import dataclass, field
from typing import List


@dataclass
class GymClass:
    """
    A weekly class slot.

    The enrolled count is derived from the id list, so
    enrolled == len(enrolled_trainee_ids) always holds in memory.
    """
    class_name: str
    schedule: str  # "Day-HH:MM", e.g. "Mon-10:00"
    trainer_name: str
    capacity: int
    enrolled_trainee_ids: List[int] = field(default_factory=list)

    @property
    def enrolled(self) -> int:
        return len(self.enrolled_trainee_ids)

    @property
    def is_full(self) -> bool:
        return self.enrolled >= self.capacity

    @property
    def day(self) -> str:
        return self.schedule.split("-", 1)[0]

    @property
    def time(self) -> str:
        return self.schedule.split("-", 1)[-1]
