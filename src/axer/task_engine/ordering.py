"""Ordering policy for the dashboard task list.

Incomplete tasks come before completed ones. Inside each group, timed tasks
come before untimed ones, timed tasks compare by their time label, and
untimed tasks compare by the position recorded at first completion.

Time labels are compared as plain strings, so ``"10:00 AM"`` sorts before
``"9:00 AM"`` and ``"12:00 PM"`` before ``"2:00 AM"``. Callers rely on this
exact order, so it is not a chronological sort.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

from .model import TaskItem


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def compare_tasks(a: TaskItem, b: TaskItem) -> int:
    """Three-way comparison of two tasks under the list ordering policy."""
    if a.is_completed != b.is_completed:
        return 1 if a.is_completed else -1
    if not a.time and not b.time:
        # never-completed untimed tasks all share position 0
        return _cmp(a.original_position or 0, b.original_position or 0)
    if not a.time:
        return 1
    if not b.time:
        return -1
    return _cmp(a.time, b.time)


def sort_tasks(tasks: Iterable[TaskItem]) -> list[TaskItem]:
    """Return *tasks* sorted by :func:`compare_tasks`; ties keep their order."""
    return sorted(tasks, key=cmp_to_key(compare_tasks))
