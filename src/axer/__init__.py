"""Provide the public `axer` package exports."""

from __future__ import annotations

from .app_state import AppState
from .task_engine import HabitItem, TaskItem, TaskOrderingEngine

__all__ = ["AppState", "HabitItem", "TaskItem", "TaskOrderingEngine"]
