"""Data models for the terminal to-do application.

A Task is a tagged value: ``kind`` is either "dated" or "recurring" and
selects which variant field is meaningful (``due_date`` or ``frequency``).
Rendering dispatches on the tag instead of on a subclass.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

DATED = "dated"
RECURRING = "recurring"
KINDS: Tuple[str, ...] = (DATED, RECURRING)

FREQUENCY_LABELS: Dict[int, str] = {1: "Daily", 7: "Weekly", 30: "Monthly"}


def frequency_label(frequency: int) -> str:
    """Exact-match label for a recurrence frequency in days."""
    return FREQUENCY_LABELS.get(frequency, "Unknown")


def status_text(completed: bool) -> str:
    return "Completed" if completed else "Not Completed"


@dataclass
class Task:
    """A single to-do item.

    Fields:
        kind: "dated" or "recurring"; fixed once the task exists.
        description: Free text, may contain spaces (empty is tolerated).
        completed: Flipped to True by mark_completed(), never back.
        due_date: Free-form date string, dated tasks only.
        frequency: Recurrence in days, recurring tasks only. Stored verbatim
            even when it has no label.
    """
    kind: str
    description: str
    completed: bool = False
    due_date: Optional[str] = None
    frequency: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown task kind: {self.kind!r}")
        if self.kind == DATED and self.due_date is None:
            raise ValueError("Dated task requires a due_date")
        if self.kind == RECURRING and self.frequency is None:
            raise ValueError("Recurring task requires a frequency")

    @classmethod
    def dated(cls, description: str, due_date: str) -> Task:
        return cls(kind=DATED, description=description, due_date=due_date)

    @classmethod
    def recurring(cls, description: str, frequency: int) -> Task:
        return cls(kind=RECURRING, description=description, frequency=frequency)

    def mark_completed(self) -> None:
        self.completed = True

    def render(self) -> str:
        """Human-readable single line for this task."""
        if self.kind == RECURRING:
            return (f"Recurring Task: Description: {self.description} "
                    f"({status_text(self.completed)}), "
                    f"Frequency: {frequency_label(self.frequency)}")
        return (f"Description: {self.description}, Due Date: {self.due_date} "
                f"({status_text(self.completed)})")
