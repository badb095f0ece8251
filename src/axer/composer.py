"""Turn "add item" form input into tasks, habits, calendar events and goals."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Iterable, Optional, Union

from loguru import logger

from .calendar_events import CalendarEvent
from .constants import (
    ALL_WEEKDAYS,
    DEFAULT_EVENT_DURATION_MINUTES,
    ITEM_KIND_EVENT,
    ITEM_KIND_HABIT,
    ITEM_KIND_TODO,
    ITEM_KINDS,
)
from .goals import Goal
from .task_engine.model import HabitItem, TaskItem

if TYPE_CHECKING:
    from .app_state import AppState


def format_time_label(moment: datetime) -> str:
    """Short time style used for task labels, e.g. ``"9:05 AM"``."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def build_todo(title: str, at: datetime, is_all_day: bool = False) -> TaskItem:
    return TaskItem(title=title, time="" if is_all_day else format_time_label(at))


def build_habit(title: str, at: datetime, days: Optional[Iterable[int]] = None) -> HabitItem:
    selected = sorted(set(days or ()))
    return HabitItem(
        title=title,
        time=format_time_label(at),
        days=selected or list(ALL_WEEKDAYS),
    )


def event_span(
    start: datetime,
    is_all_day: bool = False,
    duration_minutes: int = DEFAULT_EVENT_DURATION_MINUTES,
) -> tuple[datetime, datetime]:
    if is_all_day:
        return start, start + timedelta(days=1)
    return start, start + timedelta(minutes=duration_minutes)


async def save_item(
    state: "AppState",
    kind: str,
    title: str,
    at: datetime,
    *,
    is_all_day: bool = False,
    days: Optional[Iterable[int]] = None,
    notes: str = "",
) -> Union[TaskItem, CalendarEvent, None]:
    """Create one item of *kind* (habit, todo or event) in *state*.

    Habits and to-dos return the task added to the list. Events return the
    saved event, or ``None`` when the calendar rejected it.
    """
    if kind == ITEM_KIND_HABIT:
        return state.tasks.add_habit(build_habit(title, at, days))
    if kind == ITEM_KIND_TODO:
        return state.tasks.add_task(build_todo(title, at, is_all_day))
    if kind == ITEM_KIND_EVENT:
        start, end = event_span(at, is_all_day, state.config.event_duration_minutes)
        return await state.calendar.add_event(
            title, start, end, is_all_day=is_all_day, notes=notes
        )
    raise ValueError(f"Unknown item kind {kind!r}; expected one of {list(ITEM_KINDS)}")


def save_goal(
    state: "AppState",
    title: str,
    target_text: str,
    **fields: object,
) -> Optional[Goal]:
    """Add a goal when *target_text* parses as a number, else do nothing."""
    try:
        target = float(target_text)
    except (TypeError, ValueError):
        logger.debug("Goal {!r} not saved, target {!r} is not a number", title, target_text)
        return None
    return state.goals.add_goal(Goal(title=title, target_value=target, **fields))  # type: ignore[arg-type]
