"""Task ordering engine — the dashboard's task list and habit registry.

This is the entry-point the presentation layer uses for all task
manipulation. It wraps :class:`TaskStore` with the completion toggle and
the ordering policy, and publishes a new version after every mutation.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from ..logging_utils import summarize_task
from ..observable import Observable
from .model import HabitItem, TaskItem
from .store import TaskStore


class TaskOrderingEngine(Observable):
    """Own the ordered task list, apply completion toggles, keep it sorted.

    Mutations are synchronous: when a call returns, the new order is
    visible through :attr:`tasks` and :attr:`incomplete_tasks`.
    """

    def __init__(self, store: Optional[TaskStore] = None) -> None:
        super().__init__()
        self.store = store or TaskStore()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def tasks(self) -> list[TaskItem]:
        return self.store.read_snapshot()

    @property
    def habits(self) -> list[HabitItem]:
        return self.store.read_habits()

    @property
    def incomplete_tasks(self) -> list[TaskItem]:
        """Incomplete tasks in list order; recomputed on every access."""
        return [t for t in self.store.read_snapshot() if not t.is_completed]

    def get_task(self, task_id: str) -> Optional[TaskItem]:
        return self.store.get_one(task_id)

    def __len__(self) -> int:
        return len(self.store)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_task(self, task: TaskItem) -> TaskItem:
        """Append *task* to the end of the list without re-sorting."""
        with self.store.transaction() as tx:
            tx.add(task)
        logger.info("Added task {}: {}", task.id, task.title)
        self._publish()
        return task

    def add_habit(self, habit: HabitItem) -> TaskItem:
        """Register *habit* and append today's task instance for it."""
        task = habit.materialize()
        with self.store.transaction() as tx:
            tx.add_habit(habit)
            tx.add(task)
        logger.info("Added habit {}: {} (task {})", habit.id, habit.title, task.id)
        self._publish()
        return task

    def toggle_completion(self, task_id: str) -> None:
        """Flip completion for *task_id* and re-sort the list.

        The first time a task becomes completed its current index is
        recorded as ``original_position``. Unknown ids are ignored.
        """
        with self.store.transaction() as tx:
            index = tx.index_of(task_id)
            if index is None:
                logger.debug("Toggle ignored, unknown task {}", task_id)
                return
            task = tx.tasks[index]
            if task.toggle():
                task.record_position(index)
            tx.resort()
            logger.debug("Toggled {}", summarize_task(task))
        self._publish()
