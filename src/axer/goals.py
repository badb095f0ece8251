"""Goal tracking: target values with progress and a deadline."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Any, Optional

from loguru import logger

from .constants import DEFAULT_GOAL_DURATION_DAYS
from .observable import Observable


def _generate_id() -> str:
    return f"goal-{uuid.uuid4().hex[:8]}"


@dataclass
class Goal:
    title: str
    target_value: float
    description: str = ""
    current_value: float = 0.0
    unit: str = ""
    start_date: datetime = field(default_factory=datetime.now)
    end_date: Optional[datetime] = None
    color: str = "blue"
    reminder_enabled: bool = False
    reminder_time: Optional[datetime] = None
    id: str = field(default_factory=_generate_id)

    def __post_init__(self) -> None:
        if self.end_date is None:
            self.end_date = self.start_date + timedelta(days=DEFAULT_GOAL_DURATION_DAYS)

    @property
    def progress(self) -> float:
        """Fraction complete, capped at 1.0."""
        if self.target_value <= 0:
            return 0.0
        return min(self.current_value / self.target_value, 1.0)

    def days_remaining(self, now: Optional[datetime] = None) -> int:
        """Whole days until the end date, truncated toward zero."""
        now = now or datetime.now()
        end = self.end_date or self.start_date
        return int((end - now).total_seconds() / 86400)

    def with_value(self, current_value: float) -> "Goal":
        return replace(self, current_value=current_value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "current_value": self.current_value,
            "target_value": self.target_value,
            "unit": self.unit,
            "progress": self.progress,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "color": self.color,
            "reminder_enabled": self.reminder_enabled,
            "reminder_time": self.reminder_time.isoformat() if self.reminder_time else None,
        }


class GoalManager(Observable):
    def __init__(self) -> None:
        super().__init__()
        self._goals: list[Goal] = []

    @property
    def goals(self) -> list[Goal]:
        return list(self._goals)

    def add_goal(self, goal: Goal) -> Goal:
        self._goals.append(goal)
        logger.info("Added goal {}: {}", goal.id, goal.title)
        self._publish()
        return goal

    def update_goal(self, goal: Goal) -> bool:
        """Replace the stored goal with the same id. Unknown ids are ignored."""
        for idx, existing in enumerate(self._goals):
            if existing.id == goal.id:
                self._goals[idx] = goal
                self._publish()
                return True
        logger.debug("Update ignored, unknown goal {}", goal.id)
        return False

    def delete_goal(self, goal_id: str) -> bool:
        remaining = [g for g in self._goals if g.id != goal_id]
        if len(remaining) == len(self._goals):
            return False
        self._goals = remaining
        logger.info("Deleted goal {}", goal_id)
        self._publish()
        return True
