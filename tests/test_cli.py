from __future__ import annotations

import logging

from cli import BANNER, _parse_int, colorize_line
from models import Task
from todo_list import TaskList


def test_parse_int() -> None:
    assert _parse_int(" 7 ") == 7
    assert _parse_int("-5") == -5
    assert _parse_int("+3") == 3
    assert _parse_int("abc") is None
    assert _parse_int("") is None
    assert _parse_int("-") is None


def test_exit_prints_goodbye(run_cli) -> None:
    lines = run_cli(["0"])
    assert lines[0] == BANNER
    assert lines[-1] == "Exiting ToDo List Application. Goodbye!"


def test_banner_can_be_disabled(run_cli) -> None:
    lines = run_cli(["0"], banner=False)
    assert BANNER not in lines


def test_add_dated_and_recurring_then_display(run_cli) -> None:
    tl = TaskList()
    lines = run_cli(
        ["1", "1", "Buy milk", "2024-01-01",
         "1", "2", "Stretch", "7",
         "2", "0"],
        todo_list=tl,
    )
    assert lines.count("Task added!") == 2
    assert "[1] Description: Buy milk, Due Date: 2024-01-01 (Not Completed)" in lines
    assert "[2] Recurring Task: Description: Stretch (Not Completed), Frequency: Weekly" in lines
    assert len(tl) == 2


def test_due_date_takes_first_token(run_cli) -> None:
    tl = TaskList()
    run_cli(["1", "1", "Pay rent", "2024-03-01 extra", "0"], todo_list=tl)
    assert tl.get(1).due_date == "2024-03-01"


def test_invalid_task_type_adds_nothing(run_cli) -> None:
    tl = TaskList()
    lines = run_cli(["1", "3", "Mystery", "0"], todo_list=tl)
    assert "Invalid task type. Please try again." in lines
    assert "Task added!" not in lines
    assert len(tl) == 0


def test_invalid_frequency_adds_nothing(run_cli) -> None:
    tl = TaskList()
    lines = run_cli(["1", "2", "Stretch", "weekly", "0"], todo_list=tl)
    assert "Invalid frequency. Please try again." in lines
    assert len(tl) == 0


def test_negative_frequency_is_stored(run_cli) -> None:
    tl = TaskList()
    run_cli(["1", "2", "Odd", "-5", "0"], todo_list=tl)
    assert tl.get(1).frequency == -5


def test_invalid_menu_choice_continues(run_cli) -> None:
    lines = run_cli(["9", "x", "0"])
    assert lines.count("Invalid choice. Please try again.") == 2
    assert lines[-1] == "Exiting ToDo List Application. Goodbye!"


def test_mark_and_remove_use_one_based_positions(run_cli, sample_list: TaskList) -> None:
    lines = run_cli(["3", "2", "4", "1", "2", "0"], todo_list=sample_list)
    assert "Task marked as completed!" in lines
    assert "Task removed!" in lines
    assert "[1] Recurring Task: Description: Stretch (Completed), Frequency: Weekly" in lines


def test_invalid_positions_reported(run_cli) -> None:
    lines = run_cli(["3", "1", "4", "0", "4", "nope", "2", "0"])
    assert lines.count("Invalid task index!") == 3
    assert "No tasks in the ToDo list." in lines


def test_end_of_input_exits_cleanly(run_cli) -> None:
    lines = run_cli(["2"])
    assert lines[-1] == "Interrupted. Goodbye."


def test_colorize_line_keeps_text_when_colors_off() -> None:
    line = "[1] " + Task.dated("a", "b").render()
    # ANSI codes (if any) only wrap existing text
    plain = colorize_line(line)
    assert "Description: a, Due Date: b" in plain
    assert "Not Completed" in plain


def test_superscript_digits_are_not_numbers() -> None:
    assert _parse_int("²") is None
    assert _parse_int("-³") is None


def test_superscript_menu_choice_is_invalid(run_cli) -> None:
    lines = run_cli(["²", "0"])
    assert "Invalid choice. Please try again." in lines
    assert lines[-1] == "Exiting ToDo List Application. Goodbye!"


def test_superscript_index_leaves_list_unchanged(run_cli, sample_list: TaskList) -> None:
    lines = run_cli(["4", "²", "3", "³", "0"], todo_list=sample_list)
    assert lines.count("Invalid task index!") == 2
    assert len(sample_list) == 2
    assert sample_list.completed_count() == 0


def test_superscript_frequency_adds_nothing(run_cli) -> None:
    tl = TaskList()
    lines = run_cli(["1", "2", "Stretch", "⁷", "0"], todo_list=tl)
    assert "Invalid frequency. Please try again." in lines
    assert len(tl) == 0


def test_rejected_input_is_logged(run_cli, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="cli"):
        run_cli(["1", "2", "Stretch", "weekly", "4", "nope", "0"])
    assert "Invalid frequency 'weekly'" in caplog.text
    assert "Invalid task index 'nope'" in caplog.text
