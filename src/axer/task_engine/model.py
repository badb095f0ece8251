"""Task and habit items for the ordering engine.

A :class:`TaskItem` is a single-occurrence to-do with an optional
time-of-day label. A :class:`HabitItem` is a recurring template from which
a same-day task is materialized when the habit is added.
"""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Optional

from ..constants import ALL_WEEKDAYS


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _generate_id(prefix: str = "task") -> str:
    """Short human-friendly ID: ``<prefix>-<8hex>``."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

_FIXED_FIELDS = frozenset({"id", "title"})


@dataclass
class TaskItem:
    """A to-do on the dashboard list.

    ``id`` and ``title`` are fixed at creation; reassigning either raises
    ``AttributeError``. ``is_completed`` changes only through the engine's
    toggle, and ``original_position`` is written once, on the first
    transition to completed.
    """

    title: str = ""
    time: str = ""  # formatted time-of-day label; "" = untimed
    id: str = field(default_factory=_generate_id)
    is_completed: bool = False
    original_position: Optional[int] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"TaskItem.{name} cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def is_timed(self) -> bool:
        return bool(self.time)

    def toggle(self) -> bool:
        """Flip completion and return the new state."""
        self.is_completed = not self.is_completed
        return self.is_completed

    def record_position(self, index: int) -> None:
        """Remember *index* unless a position was already recorded."""
        if self.original_position is None:
            self.original_position = index

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class HabitItem:
    """Recurring template; ``days`` are weekday numbers with Sunday = 1."""

    title: str = ""
    time: str = ""
    days: list[int] = field(default_factory=lambda: list(ALL_WEEKDAYS))
    id: str = field(default_factory=lambda: _generate_id("habit"))

    def occurs_on(self, weekday: int) -> bool:
        return weekday in self.days

    def materialize(self) -> TaskItem:
        """Return a fresh, incomplete task instance for today."""
        return TaskItem(title=self.title, time=self.time)


def weekday_number(day: date) -> int:
    """Map a date to the habit weekday numbering (Sunday = 1 ... Saturday = 7)."""
    return day.isoweekday() % 7 + 1
