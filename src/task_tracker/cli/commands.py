# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Ask, Emit
from ..core.state import AppState
from . import presenter
from .parsing import parse_date, parse_int, priority_from_code

CommandHandler = Callable[[AppState, Ask, Emit], str | None]

logger = logging.getLogger(__name__)

EXIT_CHOICE = 9
MENU_TITLE = "Task Manager"
INVALID_CHOICE_MESSAGE = "Invalid choice — try again."

# Ids that do not parse become an id no task can have.
MISSING_ID = -1


class CommandRegistry:
    """Numbered menu registry used by the console connector (1. Add Task, 2. List Tasks, ...)."""

    def __init__(self, *, exit_choice: int = EXIT_CHOICE) -> None:
        self._handlers: dict[int, CommandHandler] = {}
        self._labels: dict[int, str] = {}
        self.exit_choice = exit_choice

    def register(self, choice: int, label: str, handler: CommandHandler) -> None:
        if choice == self.exit_choice:
            raise ValueError(f"choice {choice} is reserved for Exit")
        self._handlers[choice] = handler
        self._labels[choice] = label

    def is_exit(self, line: str) -> bool:
        return parse_int(line) == self.exit_choice

    def handle(self, state: AppState, line: str, ask: Ask, emit: Emit) -> str | None:
        """
        Dispatch one menu line like "3".
        Returns the text to show, or None when the handler already printed everything.
        """
        choice = parse_int(line)
        handler = self._handlers.get(choice) if choice is not None else None
        if handler is None:
            logger.debug("Unrecognized menu choice %r", line)
            return INVALID_CHOICE_MESSAGE

        logger.debug("Dispatching menu choice %s (%s)", choice, self._labels[choice])
        return handler(state, ask, emit)

    def build_menu(self) -> str:
        bar = "=" * 24
        lines = [bar, MENU_TITLE, bar]
        for choice in sorted(self._labels):
            lines.append(f"{choice}. {self._labels[choice]}")
        lines.append(f"{self.exit_choice}. Exit")
        lines.append("Enter your choice:")
        return "\n".join(lines)


registry = CommandRegistry()


def _ask_id(ask: Ask, prompt: str) -> int:
    task_id = parse_int(ask(prompt))
    return MISSING_ID if task_id is None else task_id


def cmd_add(state: AppState, ask: Ask, emit: Emit) -> str:
    description = ask("Description: ").strip()
    due_date = parse_date(ask("Due date (yyyy-MM-dd) or leave blank: "), emit)

    # Blank or non-numeric input takes the default code.
    code = parse_int(ask("Priority: 1=LOW, 2=MEDIUM, 3=HIGH (default 2): "))
    priority = priority_from_code(2 if code is None else code, emit)

    task = state.task_store.add_task(description, due_date, priority)
    return presenter.render_added(task)


def cmd_list(state: AppState, ask: Ask, emit: Emit) -> str:
    return presenter.render_task_list(state.task_store.list_tasks())


def cmd_complete(state: AppState, ask: Ask, emit: Emit) -> str:
    task_id = _ask_id(ask, "Task ID to mark complete: ")
    return presenter.render_completed(state.task_store.complete_task(task_id))


def cmd_remove(state: AppState, ask: Ask, emit: Emit) -> str:
    task_id = _ask_id(ask, "Task ID to remove: ")
    return presenter.render_removed(state.task_store.remove_task(task_id))


def cmd_search(state: AppState, ask: Ask, emit: Emit) -> str:
    keyword = ask("Enter search keyword: ").strip()
    return presenter.render_search(keyword, state.task_store.search_tasks(keyword))


def cmd_edit(state: AppState, ask: Ask, emit: Emit) -> str:
    """
    Edit prompts:
      description -> blank keeps the current one
      due date    -> blank (or invalid) clears it
      priority    -> blank or non-numeric keeps the current one
    """
    task_id = _ask_id(ask, "Task ID to edit: ")
    description = ask("New description (leave blank to keep): ")
    due_date = parse_date(ask("New due date (yyyy-MM-dd) or blank to clear: "), emit)

    code = parse_int(ask("New priority: 1=LOW, 2=MEDIUM, 3=HIGH or blank to keep current: "))
    priority = priority_from_code(code, emit) if code is not None else None

    result = state.task_store.edit_task(
        task_id,
        description=description if description.strip() else None,
        due_date=due_date,
        priority=priority,
    )
    return presenter.render_edited(result)


def cmd_workload(state: AppState, ask: Ask, emit: Emit) -> str:
    return presenter.render_workload(state.task_store.workload_summary())


def cmd_overdue(state: AppState, ask: Ask, emit: Emit) -> str:
    return presenter.render_overdue(state.task_store.upcoming_overdue_info())


registry.register(1, "Add Task", cmd_add)
registry.register(2, "List Tasks", cmd_list)
registry.register(3, "Complete Task", cmd_complete)
registry.register(4, "Remove Task", cmd_remove)
registry.register(5, "Search Tasks", cmd_search)
registry.register(6, "Edit Task", cmd_edit)
registry.register(7, "Workload Summary", cmd_workload)
registry.register(8, "Check Overdue", cmd_overdue)
