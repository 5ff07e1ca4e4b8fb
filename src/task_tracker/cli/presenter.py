# src/task_tracker/cli/presenter.py

from __future__ import annotations

from ..tasks.task_models import OverdueLevel, OverdueReport, Task, TaskResult, Workload

NOT_FOUND_MESSAGE = "Task not found."

_WORKLOAD_LABELS = {
    Workload.NONE: "No tasks — you're free!",
    Workload.LIGHT: "Light load",
    Workload.MODERATE: "Moderate load",
    Workload.HEAVY: "Heavy load — prioritize!",
}


def format_task_line(task: Task) -> str:
    status = "✔ Done" if task.completed else "❌ Pending"
    due = task.due_date.isoformat() if task.due_date else "No due date"
    return f"{task.id}. {task.description} | due: {due} | priority: {task.priority} | {status}"


def format_search_line(task: Task) -> str:
    due = task.due_date.isoformat() if task.due_date else "none"
    return f"{task.id}. {task.description} | {task.priority} | due: {due}"


def render_task_list(tasks: list[Task]) -> str:
    if not tasks:
        return "No tasks found."
    lines = [f"\n--- Task List ({len(tasks)}) ---"]
    lines.extend(format_task_line(t) for t in tasks)
    return "\n".join(lines)


def render_added(task: Task) -> str:
    return f"Task added: {task.id} - {task.description}"


def render_completed(result: TaskResult) -> str:
    if not result.found or result.task is None:
        return NOT_FOUND_MESSAGE
    return f"Task '{result.task.description}' marked as complete."


def render_removed(removed: bool) -> str:
    return "Task removed." if removed else NOT_FOUND_MESSAGE


def render_search(keyword: str, tasks: list[Task]) -> str:
    if not tasks:
        return f"No tasks matching '{keyword}' found."
    lines = ["\n--- Search Results ---"]
    lines.extend(format_search_line(t) for t in tasks)
    return "\n".join(lines)


def render_edited(result: TaskResult) -> str:
    if not result.found or result.task is None:
        return NOT_FOUND_MESSAGE
    return f"Task {result.task.id} updated."


def render_workload(workload: Workload) -> str:
    return f"Workload: {_WORKLOAD_LABELS[workload]}"


def render_overdue(report: OverdueReport) -> str:
    if report.level is OverdueLevel.NONE:
        return "No overdue tasks."
    if report.level is OverdueLevel.ONE:
        return "1 overdue task — fix it soon."
    return f"{report.count} overdue tasks — take action."
