# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on the TaskRepo Protocol instead of the concrete TaskStore,
so tests can hand in fakes and another store could be dropped in later.
"""

from collections.abc import Callable
from datetime import date
from typing import Protocol

from ..tasks.task_models import OverdueReport, Priority, Task, TaskResult, Workload

Ask = Callable[[str], str]
# Reads one line of user input after showing the prompt.

Emit = Callable[[str], None]
# Shows one message to the user.


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...
    def get_task(self, task_id: int) -> Task | None: ...

    def add_task(
            self,
            description: str,
            due_date: date | None = None,
            priority: Priority = Priority.MEDIUM,
    ) -> Task: ...

    def list_tasks(self) -> list[Task]: ...
    def complete_task(self, task_id: int) -> TaskResult: ...
    def remove_task(self, task_id: int) -> bool: ...
    def search_tasks(self, keyword: str) -> list[Task]: ...

    def edit_task(
            self,
            task_id: int,
            *,
            description: str | None = None,
            due_date: date | None,
            priority: Priority | None = None,
    ) -> TaskResult: ...

    def workload_summary(self) -> Workload: ...
    def upcoming_overdue_info(self, today: date | None = None) -> OverdueReport: ...
