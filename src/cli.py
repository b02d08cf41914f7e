"""Numbered-menu command loop for the to-do list.

Positions typed by the user are passed to the list unchanged (1-based).
Malformed input is reported and the menu is shown again; only choice 0,
EOF or Ctrl-C end the loop.
"""
import logging
import re
from typing import Optional
from models import Task
from todo_list import TaskList, EMPTY_MESSAGE, INVALID_INDEX_MESSAGE
from theme import color, HEADER_COLOR, INDEX_COLOR, STATUS_COLOR, EMPTY_COLOR, BOLD

logger = logging.getLogger(__name__)

BANNER = "===== ToDo List Application ====="
MENU = "1. Add Task\n2. Display Tasks\n3. Mark Task as Completed\n4. Remove Task\n0. Exit"
STATUS_RE = re.compile(r"\((Completed|Not Completed)\)")
INDEX_RE = re.compile(r"^\[\d+\]")

TASK_TYPE_REGULAR = 1
TASK_TYPE_RECURRING = 2


def _parse_int(raw: str) -> Optional[int]:
    """Integer value of a prompt answer (sign allowed), None if not a number."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def colorize_line(line: str) -> str:
    if line == EMPTY_MESSAGE:
        return color(line, EMPTY_COLOR)
    line = INDEX_RE.sub(lambda m: color(m.group(0), INDEX_COLOR), line, count=1)
    return STATUS_RE.sub(lambda m: color(m.group(0), STATUS_COLOR[m.group(1)]), line)


class CLI:
    def __init__(self, todo_list: TaskList, banner: bool = True):
        self.todo_list: TaskList = todo_list
        self.banner: bool = banner

    def run(self) -> None:
        """Main menu loop; returns when the user exits or input ends."""
        exit_message: Optional[str] = None
        try:
            while True:
                if self.banner:
                    print(color(BANNER, HEADER_COLOR, BOLD))
                print(MENU)
                choice = _parse_int(input("Enter your choice: "))
                if choice == 0:
                    exit_message = "Exiting ToDo List Application. Goodbye!"
                    break
                self._handle_choice(choice)
                print()
        except (KeyboardInterrupt, EOFError):
            print()
            exit_message = "Interrupted. Goodbye."
        finally:
            logger.debug("Command loop finished: %s", self.todo_list)
            if exit_message:
                print(exit_message)

    # -------------------- command dispatch --------------------
    def _handle_choice(self, choice: Optional[int]) -> None:
        if choice == 1:
            self._add()
        elif choice == 2:
            self._display()
        elif choice == 3:
            self._mark_completed()
        elif choice == 4:
            self._remove()
        else:
            logger.debug("Invalid menu choice %r", choice)
            print("Invalid choice. Please try again.")

    # -------------------- user-interactive flows --------------------
    def _add(self) -> None:
        task_type = _parse_int(input("Select Task Type: 1. Regular Task 2. Recurring Task: "))
        description = input("Enter task description: ").strip()
        task = self._build_task(task_type, description)
        if task is None:
            return
        self.todo_list.add(task)
        print("Task added!")

    def _build_task(self, task_type: Optional[int], description: str) -> Optional[Task]:
        if task_type == TASK_TYPE_REGULAR:
            # only the first token is taken as the date
            tokens = input("Enter due date (yyyy-mm-dd): ").split()
            return Task.dated(description, tokens[0] if tokens else "")
        if task_type == TASK_TYPE_RECURRING:
            raw = input("Enter frequency (1: Daily, 7: Weekly, 30: Monthly): ")
            frequency = _parse_int(raw)
            if frequency is None:
                logger.debug("Invalid frequency %r", raw)
                print("Invalid frequency. Please try again.")
                return None
            return Task.recurring(description, frequency)
        logger.debug("Invalid task type %r", task_type)
        print("Invalid task type. Please try again.")
        return None

    def _display(self) -> None:
        for line in self.todo_list.display_all():
            print(colorize_line(line))

    def _read_index(self, prompt: str) -> Optional[int]:
        raw = input(prompt)
        index = _parse_int(raw)
        if index is None:
            logger.debug("Invalid task index %r", raw)
            print(INVALID_INDEX_MESSAGE)
        return index

    def _mark_completed(self) -> None:
        index = self._read_index("Enter the index of the task to mark as completed: ")
        if index is not None:
            print(self.todo_list.mark_completed(index))

    def _remove(self) -> None:
        index = self._read_index("Enter the index of the task to remove: ")
        if index is not None:
            print(self.todo_list.remove(index))
