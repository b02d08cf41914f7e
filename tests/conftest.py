from __future__ import annotations

import re
from typing import Callable, Iterable

import pytest

from cli import CLI
from models import Task
from todo_list import TaskList

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture()
def todo_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def sample_list() -> TaskList:
    """Two-task list: a dated task followed by a weekly recurring one."""
    tl = TaskList()
    tl.add(Task.dated("Buy milk", "2024-01-01"))
    tl.add(Task.recurring("Stretch", 7))
    return tl


@pytest.fixture()
def run_cli(monkeypatch, capsys) -> Callable[..., list[str]]:
    """
    Drive CLI.run() with scripted answers and return printed lines (ANSI stripped).

    Running out of answers raises EOFError, which the loop treats as an exit.
    """

    def _run(answers: Iterable[str], todo_list: TaskList | None = None, banner: bool = True) -> list[str]:
        script = iter(answers)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(script)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
        CLI(todo_list if todo_list is not None else TaskList(), banner=banner).run()
        out = capsys.readouterr().out
        return ANSI_RE.sub("", out).splitlines()

    return _run
