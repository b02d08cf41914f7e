"""To-do list logic: ordered task ownership, positional mutation, rendering.

Positions are 1-based and are not stable identities: removing a task shifts
every later task down by one. Each mutating call validates the position
before touching the sequence and returns a user-facing result message.
"""
import logging
from typing import Iterator, List, Optional
from models import Task

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No tasks in the ToDo list."
COMPLETED_MESSAGE = "Task marked as completed!"
REMOVED_MESSAGE = "Task removed!"
INVALID_INDEX_MESSAGE = "Invalid task index!"


class TaskList:
    def __init__(self) -> None:
        self.tasks: List[Task] = []

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def is_valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self.tasks)

    def get(self, index: int) -> Optional[Task]:
        """Task at a 1-based position, or None when out of range."""
        if not self.is_valid_index(index):
            return None
        return self.tasks[index - 1]

    def completed_count(self) -> int:
        return sum(1 for t in self.tasks if t.completed)

    # -------------------- task operations --------------------
    def add(self, task: Task) -> None:
        self.tasks.append(task)
        logger.debug("Task added position=%s kind=%s", len(self.tasks), task.kind)

    def mark_completed(self, index: int) -> str:
        task = self.get(index)
        if task is None:
            logger.info("Rejected completion of position %s (length %s)", index, len(self.tasks))
            return INVALID_INDEX_MESSAGE
        task.mark_completed()
        logger.debug("Task completed position=%s", index)
        return COMPLETED_MESSAGE

    def remove(self, index: int) -> str:
        if not self.is_valid_index(index):
            logger.info("Rejected removal of position %s (length %s)", index, len(self.tasks))
            return INVALID_INDEX_MESSAGE
        removed = self.tasks.pop(index - 1)
        logger.debug("Task removed position=%s kind=%s", index, removed.kind)
        return REMOVED_MESSAGE

    # -------------------- display --------------------
    def display_all(self) -> List[str]:
        """One ``[n] <task>`` line per task, or a single empty-list line."""
        if not self.tasks:
            return [EMPTY_MESSAGE]
        return [f"[{pos}] {task.render()}" for pos, task in enumerate(self.tasks, start=1)]

    def __str__(self) -> str:
        return f"{len(self.tasks)} tasks, {self.completed_count()} completed"
