# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class Priority(StrEnum):
    """
    Task priority.

    Ordered LOW < MEDIUM < HIGH; the order is only used as a sort tie-break.
    """

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank >= other.rank


_PRIORITY_RANK = {Priority.LOW: 0, Priority.MEDIUM: 1, Priority.HIGH: 2}


@dataclass(slots=True)
class Task:
    id: int
    description: str
    due_date: date | None = None
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    created_at: date = field(default_factory=date.today)


class Outcome(StrEnum):
    OK = "ok"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class TaskResult:
    """Outcome of an operation addressed by task id (complete, edit)."""

    outcome: Outcome
    task: Task | None = None

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.OK

    @classmethod
    def ok(cls, task: Task) -> TaskResult:
        return cls(Outcome.OK, task)

    @classmethod
    def not_found(cls) -> TaskResult:
        return cls(Outcome.NOT_FOUND)


class Workload(StrEnum):
    NONE = "no tasks"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"

    @classmethod
    def for_count(cls, count: int) -> Workload:
        if count <= 0:
            return cls.NONE
        if count <= 3:
            return cls.LIGHT
        if count <= 7:
            return cls.MODERATE
        return cls.HEAVY


class OverdueLevel(StrEnum):
    NONE = "none"
    ONE = "one"
    MANY = "many"


@dataclass(frozen=True, slots=True)
class OverdueReport:
    tasks: tuple[Task, ...] = ()

    @property
    def count(self) -> int:
        return len(self.tasks)

    @property
    def level(self) -> OverdueLevel:
        if self.count == 0:
            return OverdueLevel.NONE
        if self.count == 1:
            return OverdueLevel.ONE
        return OverdueLevel.MANY
