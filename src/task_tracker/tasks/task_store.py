# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from .task_models import OverdueReport, Priority, Task, TaskResult, Workload

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Tasks live in an insertion-ordered dict keyed by id, so lookups by id are O(1)
    and insertion order is simply dict order.

    Ownership:
    - the store is the only holder of its Task objects
    - every Task returned from a public method is a copy; mutating it has no effect here

    Ids start at 1, grow by one per add_task call and are never reused, even after removal.
    """

    def __init__(self, *, today: Callable[[], date] = date.today) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._today = today
        logger.info("TaskStore ready total=%s", len(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    @staticmethod
    def _snapshot(task: Task) -> Task:
        return replace(task)

    @staticmethod
    def _sort_key(task: Task) -> tuple[bool, date, int]:
        # Undated tasks go last; date.min is only a placeholder behind the leading flag.
        return (task.due_date is None, task.due_date or date.min, task.priority.rank)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        return self._snapshot(task) if task is not None else None

    def add_task(
        self,
        description: str,
        due_date: date | None = None,
        priority: Priority = Priority.MEDIUM,
    ) -> Task:
        task_id = self._next_id
        self._next_id += 1

        task = Task(
            id=task_id,
            description=description,
            due_date=due_date,
            priority=priority,
            created_at=self._today(),
        )
        self._tasks[task_id] = task
        logger.debug(
            "Task added id=%s priority=%s due_date=%s",
            task_id,
            priority.value,
            due_date,
        )
        return self._snapshot(task)

    def list_tasks(self) -> list[Task]:
        """
        All tasks ordered by due date (undated last), then priority LOW..HIGH.

        Ties beyond that keep insertion order. An empty list means the store is empty.
        """
        ordered = sorted(self._tasks.values(), key=self._sort_key)
        return [self._snapshot(t) for t in ordered]

    def complete_task(self, task_id: int) -> TaskResult:
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("complete_task: id=%s not found", task_id)
            return TaskResult.not_found()

        if not task.completed:
            task.completed = True
            logger.debug("Task completed id=%s", task_id)
        return TaskResult.ok(self._snapshot(task))

    def remove_task(self, task_id: int) -> bool:
        removed = self._tasks.pop(task_id, None)
        if removed is None:
            logger.debug("remove_task: id=%s not found", task_id)
            return False
        logger.debug("Task removed id=%s", task_id)
        return True

    def search_tasks(self, keyword: str) -> list[Task]:
        """Case-insensitive substring match on description, in insertion order."""
        needle = keyword.casefold()
        return [
            self._snapshot(t) for t in self._tasks.values() if needle in t.description.casefold()
        ]

    def edit_task(
        self,
        task_id: int,
        *,
        description: str | None = None,
        due_date: date | None,
        priority: Priority | None = None,
    ) -> TaskResult:
        """
        Update a task in place.

        - description: replaced only when non-blank
        - due_date: always replaced, None clears the deadline
        - priority: replaced when not None
        """
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("edit_task: id=%s not found", task_id)
            return TaskResult.not_found()

        if description is not None and description.strip():
            task.description = description
        task.due_date = due_date
        if priority is not None:
            task.priority = priority

        logger.debug(
            "Task edited id=%s priority=%s due_date=%s",
            task_id,
            task.priority.value,
            task.due_date,
        )
        return TaskResult.ok(self._snapshot(task))

    def workload_summary(self) -> Workload:
        return Workload.for_count(len(self._tasks))

    def upcoming_overdue_info(self, today: date | None = None) -> OverdueReport:
        """Incomplete tasks whose due date is strictly before `today` (default: the store clock)."""
        if today is None:
            today = self._today()

        overdue = tuple(
            self._snapshot(t)
            for t in self._tasks.values()
            if t.due_date is not None and not t.completed and t.due_date < today
        )
        return OverdueReport(tasks=overdue)
