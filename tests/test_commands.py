# tests/test_commands.py

from __future__ import annotations

from datetime import date

import pytest

from task_tracker.cli.commands import INVALID_CHOICE_MESSAGE, CommandRegistry, registry
from task_tracker.cli.parsing import INVALID_DATE_MESSAGE, UNKNOWN_PRIORITY_MESSAGE
from task_tracker.tasks.task_models import Priority

from .fakes import FakeConsole


def _run(state, choice: str, *inputs: str) -> tuple[str | None, FakeConsole]:
    console = FakeConsole(inputs=list(inputs))
    reply = registry.handle(state, choice, console.ask, console.emit)
    return reply, console


def test_command_registry_routes_by_number(state) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, ask, emit):
        called["a"] += 1
        emit("note")
        return "done"

    reg.register(1, "Do A", handler)
    console = FakeConsole()

    assert reg.handle(state, " 1 ", console.ask, console.emit) == "done"
    assert called["a"] == 1
    assert console.outputs == ["note"]


@pytest.mark.parametrize("line", ["", "abc", "0", "42", "1.0"])
def test_command_registry_unknown_choice(state, line: str) -> None:
    reg = CommandRegistry()
    reg.register(1, "Do A", lambda state, ask, emit: "a")
    console = FakeConsole()
    assert reg.handle(state, line, console.ask, console.emit) == INVALID_CHOICE_MESSAGE
    assert INVALID_CHOICE_MESSAGE == "Invalid choice — try again."


def test_exit_choice_is_reserved() -> None:
    reg = CommandRegistry()
    with pytest.raises(ValueError):
        reg.register(9, "Exit", lambda state, ask, emit: None)
    assert reg.is_exit("9")
    assert reg.is_exit(" 9\n")
    assert not reg.is_exit("8")


def test_build_menu_lists_all_nine_choices() -> None:
    menu = registry.build_menu().splitlines()
    assert menu[1] == "Task Manager"
    assert menu[3:12] == [
        "1. Add Task",
        "2. List Tasks",
        "3. Complete Task",
        "4. Remove Task",
        "5. Search Tasks",
        "6. Edit Task",
        "7. Workload Summary",
        "8. Check Overdue",
        "9. Exit",
    ]
    assert menu[-1] == "Enter your choice:"


def test_add_command(state) -> None:
    reply, console = _run(state, "1", "  Finish Kotlin assignment ", "2025-01-01", "3")

    assert reply == "Task added: 1 - Finish Kotlin assignment"
    task = state.task_store.get_task(1)
    assert task.due_date == date(2025, 1, 1)
    assert task.priority is Priority.HIGH
    assert console.outputs == []


def test_add_command_defaults_and_diagnostics(state) -> None:
    reply, console = _run(state, "1", "Call mom", "next week", "")

    assert reply == "Task added: 1 - Call mom"
    task = state.task_store.get_task(1)
    assert task.due_date is None
    assert task.priority is Priority.MEDIUM
    assert console.outputs == [INVALID_DATE_MESSAGE]


def test_add_command_out_of_range_priority(state) -> None:
    _, console = _run(state, "1", "x", "", "7")

    assert state.task_store.get_task(1).priority is Priority.MEDIUM
    assert console.outputs == [UNKNOWN_PRIORITY_MESSAGE]


def test_add_command_non_numeric_priority_takes_default(state) -> None:
    _, console = _run(state, "1", "x", "", "high")

    assert state.task_store.get_task(1).priority is Priority.MEDIUM
    assert console.outputs == []


def test_list_command(state) -> None:
    reply, _ = _run(state, "2")
    assert reply == "No tasks found."

    state.task_store.add_task("A", None, Priority.MEDIUM)
    state.task_store.add_task("B", date(2025, 1, 1), Priority.HIGH)
    state.task_store.add_task("C", date(2025, 1, 1), Priority.LOW)

    reply, _ = _run(state, "2")
    lines = reply.strip().splitlines()
    assert lines[0] == "--- Task List (3) ---"
    assert [line.split(".")[0] for line in lines[1:]] == ["3", "2", "1"]


def test_complete_and_remove_commands(state) -> None:
    state.task_store.add_task("Pay rent")

    assert _run(state, "3", "1")[0] == "Task 'Pay rent' marked as complete."
    assert _run(state, "3", "1")[0] == "Task 'Pay rent' marked as complete."
    assert _run(state, "3", "abc")[0] == "Task not found."

    assert _run(state, "4", "2")[0] == "Task not found."
    assert _run(state, "4", "1")[0] == "Task removed."
    assert state.task_store.count_tasks() == 0


def test_search_command(state) -> None:
    state.task_store.add_task("Finish Kotlin assignment")
    state.task_store.add_task("Buy milk")

    reply, _ = _run(state, "5", "finish")
    assert reply.strip().splitlines() == [
        "--- Search Results ---",
        "1. Finish Kotlin assignment | MEDIUM | due: none",
    ]
    assert _run(state, "5", "gym")[0] == "No tasks matching 'gym' found."


def test_edit_command_updates_and_keeps(state) -> None:
    state.task_store.add_task("old", date(2025, 1, 1), Priority.LOW)

    reply, console = _run(state, "6", "1", "", "2025-02-02", "")

    assert reply == "Task 1 updated."
    task = state.task_store.get_task(1)
    assert task.description == "old"
    assert task.due_date == date(2025, 2, 2)
    assert task.priority is Priority.LOW
    assert console.outputs == []


def test_edit_command_blank_due_date_clears_it(state) -> None:
    state.task_store.add_task("old", date(2025, 1, 1), Priority.LOW)

    _run(state, "6", "1", "new text", "", "3")

    task = state.task_store.get_task(1)
    assert task.description == "new text"
    assert task.due_date is None
    assert task.priority is Priority.HIGH


def test_edit_command_unknown_id(state) -> None:
    state.task_store.add_task("old", date(2025, 1, 1))

    reply, _ = _run(state, "6", "5", "new", "", "1")

    assert reply == "Task not found."
    assert state.task_store.get_task(1).due_date == date(2025, 1, 1)


def test_workload_and_overdue_commands(state) -> None:
    assert _run(state, "7")[0] == "Workload: No tasks — you're free!"
    assert _run(state, "8")[0] == "No overdue tasks."

    # store clock is fixed at 2025-06-01
    state.task_store.add_task("late", date(2025, 5, 1))
    assert _run(state, "7")[0] == "Workload: Light load"
    assert _run(state, "8")[0] == "1 overdue task — fix it soon."
