"""Dependency-injection root: one instance of every state container."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from .calendar_events import CalendarManager, EventStore, InMemoryEventStore
from .config import AppConfig, load_app_config
from .goals import GoalManager
from .logging_utils import configure_logging
from .task_engine import TaskOrderingEngine
from .task_engine.model import weekday_number
from .theme import ThemeSettings


@dataclass
class AppState:
    """Containers handed to the presentation layer by reference."""

    config: AppConfig
    tasks: TaskOrderingEngine
    goals: GoalManager
    theme: ThemeSettings
    calendar: CalendarManager

    @classmethod
    def create(
        cls,
        config: Optional[AppConfig] = None,
        event_store: Optional[EventStore] = None,
    ) -> "AppState":
        config = config or AppConfig()
        return cls(
            config=config,
            tasks=TaskOrderingEngine(),
            goals=GoalManager(),
            theme=ThemeSettings(config.theme),
            calendar=CalendarManager(
                event_store or InMemoryEventStore(),
                window_days=config.calendar_window_days,
            ),
        )

    @classmethod
    def from_project(
        cls,
        project_dir: Path,
        event_store: Optional[EventStore] = None,
    ) -> "AppState":
        """Load config from *project_dir*, configure logging, and build state."""
        config, err = load_app_config(project_dir)
        configure_logging(config.log_level)
        if err:
            logger.warning("Ignoring invalid config, using defaults: {}", err)
        return cls.create(config, event_store)

    def dashboard(self, now: Optional[datetime] = None) -> dict[str, Any]:
        """Plain snapshot of what the dashboard screen shows."""
        now = now or datetime.now()
        weekday = weekday_number(now.date())
        return {
            "date": now.date().isoformat(),
            "theme": self.theme.selected_theme.value,
            "tasks": [t.to_dict() for t in self.tasks.incomplete_tasks],
            "habits_today": [h.title for h in self.tasks.habits if h.occurs_on(weekday)],
            "goals": [g.to_dict() for g in self.goals.goals],
            "events_today": [e.title for e in self.calendar.events_on(now.date())],
        }
