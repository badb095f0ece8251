"""In-memory task store with lock-protected transactions.

All reads and writes go through :meth:`TaskStore.transaction`, which holds a
re-entrant lock for the duration of the block so that a toggle's
read-modify-sort sequence is one critical section.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from .model import HabitItem, TaskItem
from .ordering import sort_tasks


# ---------------------------------------------------------------------------
# TaskStore
# ---------------------------------------------------------------------------

class TaskStore:
    """Thread-safe holder of the ordered task list and the habit registry."""

    def __init__(self) -> None:
        self._tasks: list[TaskItem] = []
        self._habits: list[HabitItem] = []
        self._lock = threading.RLock()

    # -- public API ---------------------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[_TaskTx]:
        """Acquire the lock and yield a transaction over the live lists.

        Usage::

            with store.transaction() as tx:
                task = tx.get("task-abc12345")
                task.toggle()
                tx.resort()
        """
        with self._lock:
            tx = _TaskTx(self._tasks, self._habits)
            yield tx

    def read_snapshot(self) -> list[TaskItem]:
        """Return a shallow copy of the ordered task list."""
        with self._lock:
            return list(self._tasks)

    def read_habits(self) -> list[HabitItem]:
        with self._lock:
            return list(self._habits)

    def get_one(self, task_id: str) -> Optional[TaskItem]:
        with self._lock:
            for t in self._tasks:
                if t.id == task_id:
                    return t
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)


class _TaskTx:
    """Mutations over the store's lists, applied while the lock is held."""

    def __init__(self, tasks: list[TaskItem], habits: list[HabitItem]) -> None:
        self.tasks = tasks
        self.habits = habits
        self._index: dict[str, int] = {t.id: i for i, t in enumerate(tasks)}

    # -- lookups ------------------------------------------------------------

    def get(self, task_id: str) -> Optional[TaskItem]:
        idx = self._index.get(task_id)
        return self.tasks[idx] if idx is not None else None

    def index_of(self, task_id: str) -> Optional[int]:
        return self._index.get(task_id)

    # -- mutations ----------------------------------------------------------

    def add(self, task: TaskItem) -> TaskItem:
        if task.id in self._index:
            raise ValueError(f"Task {task.id} already exists")
        self._index[task.id] = len(self.tasks)
        self.tasks.append(task)
        return task

    def add_habit(self, habit: HabitItem) -> HabitItem:
        self.habits.append(habit)
        return habit

    def resort(self) -> None:
        """Re-sort the whole list in place under the ordering policy."""
        self.tasks[:] = sort_tasks(self.tasks)
        self._index = {t.id: i for i, t in enumerate(self.tasks)}
