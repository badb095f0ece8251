"""Tests for the state container root (app_state.py)."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from pathlib import Path

from axer.app_state import AppState
from axer.calendar_events import CalendarEvent, InMemoryEventStore
from axer.config import AppConfig
from axer.goals import Goal
from axer.task_engine.model import HabitItem, TaskItem
from axer.theme import AppTheme

NOW = datetime(2025, 4, 20, 9, 0)  # a Sunday


def test_create_wires_config() -> None:
    state = AppState.create(AppConfig(theme=AppTheme.BLUE, calendar_window_days=7))
    assert state.theme.selected_theme is AppTheme.BLUE
    assert state.calendar.window_days == 7
    assert len(state.tasks) == 0


def test_states_are_independent() -> None:
    first = AppState.create()
    second = AppState.create()
    first.tasks.add_task(TaskItem(title="Only in first"))
    assert len(second.tasks) == 0


def test_from_project_reads_config(tmp_path: Path) -> None:
    cfg = tmp_path / ".axer" / "config.yaml"
    cfg.parent.mkdir()
    cfg.write_text("theme: dark\nlog_level: WARNING\n")

    state = AppState.from_project(tmp_path)

    assert state.theme.selected_theme is AppTheme.DARK
    assert state.config.log_level == "WARNING"


def test_from_project_falls_back_on_bad_config(tmp_path: Path) -> None:
    cfg = tmp_path / ".axer" / "config.yaml"
    cfg.parent.mkdir()
    cfg.write_text("theme: neon\n")

    state = AppState.from_project(tmp_path)

    assert state.config == AppConfig()


def test_from_project_unknown_log_level_falls_back(tmp_path: Path) -> None:
    cfg = tmp_path / ".axer" / "config.yaml"
    cfg.parent.mkdir()
    cfg.write_text("log_level: VERBOSE\n")

    state = AppState.from_project(tmp_path)

    assert state.config.log_level == "INFO"


def test_dashboard_snapshot() -> None:
    store = InMemoryEventStore([CalendarEvent(title="Brunch", start=NOW, end=NOW + timedelta(hours=2))])
    state = AppState.create(event_store=store)
    walk = state.tasks.add_task(TaskItem(title="Walk dog", time="8:00 AM"))
    state.tasks.add_task(TaskItem(title="Email"))
    state.tasks.add_habit(HabitItem(title="Gym", time="6:00 PM", days=[2, 4]))
    state.tasks.add_habit(HabitItem(title="Read", time="9:00 PM", days=[1]))
    state.tasks.toggle_completion(walk.id)
    state.goals.add_goal(Goal(title="Books", target_value=20, current_value=8))
    asyncio.run(state.calendar.load_events(NOW))

    board = state.dashboard(NOW)

    assert board["date"] == "2025-04-20"
    assert board["theme"] == "system"
    assert [t["title"] for t in board["tasks"]] == ["Gym", "Read", "Email"]
    assert board["habits_today"] == ["Read"]
    assert board["goals"][0]["progress"] == 0.4
    assert board["events_today"] == ["Brunch"]
