"""Task and habit ordering engine for the planner dashboard.

This package provides the task/habit model, the in-memory lock-protected
store, the ordering policy, and the engine the presentation layer drives.
"""

from .engine import TaskOrderingEngine
from .model import HabitItem, TaskItem

__all__ = ["HabitItem", "TaskItem", "TaskOrderingEngine"]
