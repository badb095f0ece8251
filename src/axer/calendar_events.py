"""Calendar collaborator: an event store interface and the manager over it.

The store query runs in a worker thread; :class:`CalendarManager` awaits it
and applies the result on the caller's side, so event state is only ever
written by the awaiting coroutine.
"""

from __future__ import annotations

import asyncio
import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from loguru import logger

from .constants import DEFAULT_CALENDAR_WINDOW_DAYS
from .observable import Observable

DEFAULT_CALENDAR = "Personal"


class CalendarSaveError(Exception):
    """The event store rejected an event."""

    pass


@dataclass
class CalendarEvent:
    title: str
    start: datetime
    end: datetime
    is_all_day: bool = False
    notes: str = ""
    calendar: str = DEFAULT_CALENDAR
    id: str = field(default_factory=lambda: f"event-{uuid.uuid4().hex[:8]}")

    def overlaps(self, start: datetime, end: datetime) -> bool:
        return self.start < end and start < self.end


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

class EventStore(ABC):
    """Access to the device calendar database."""

    default_calendar: str = DEFAULT_CALENDAR

    @abstractmethod
    def request_access(self) -> bool: ...

    @abstractmethod
    def calendars(self) -> list[str]: ...

    @abstractmethod
    def events_between(
        self, start: datetime, end: datetime, calendars: Iterable[str]
    ) -> list[CalendarEvent]: ...

    @abstractmethod
    def save(self, event: CalendarEvent) -> None:
        """Persist *event*; raises :class:`CalendarSaveError` on failure."""


class InMemoryEventStore(EventStore):
    """Event store kept in process memory."""

    def __init__(
        self,
        events: Optional[Iterable[CalendarEvent]] = None,
        *,
        calendars: Optional[Iterable[str]] = None,
        access_granted: bool = True,
        fail_saves: bool = False,
    ) -> None:
        self._events: list[CalendarEvent] = list(events or [])
        self._calendars = list(calendars or [self.default_calendar])
        self._lock = threading.Lock()
        self.access_granted = access_granted
        self.fail_saves = fail_saves

    def request_access(self) -> bool:
        return self.access_granted

    def calendars(self) -> list[str]:
        return list(self._calendars)

    def events_between(
        self, start: datetime, end: datetime, calendars: Iterable[str]
    ) -> list[CalendarEvent]:
        wanted = set(calendars)
        with self._lock:
            matches = [
                e for e in self._events
                if e.calendar in wanted and e.overlaps(start, end)
            ]
        return sorted(matches, key=lambda e: e.start)

    def save(self, event: CalendarEvent) -> None:
        if self.fail_saves:
            raise CalendarSaveError(f"Cannot save event {event.title!r}: store is read-only")
        if event.calendar not in self._calendars:
            raise CalendarSaveError(f"Unknown calendar {event.calendar!r}")
        with self._lock:
            self._events.append(event)


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------

class CalendarManager(Observable):
    """Holds the events loaded around "now" for the calendar and dashboard."""

    def __init__(self, store: EventStore, window_days: int = DEFAULT_CALENDAR_WINDOW_DAYS) -> None:
        super().__init__()
        self.store = store
        self.window_days = window_days
        self._events: list[CalendarEvent] = []

    @property
    def events(self) -> list[CalendarEvent]:
        return list(self._events)

    def events_on(self, day: date) -> list[CalendarEvent]:
        return [e for e in self._events if e.start.date() == day]

    def _query(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        return self.store.events_between(start, end, self.store.calendars())

    async def request_access_and_load(self, now: Optional[datetime] = None) -> list[CalendarEvent]:
        granted = await asyncio.to_thread(self.store.request_access)
        if not granted:
            logger.warning("Calendar access denied; events not loaded")
            return []
        return await self.load_events(now)

    async def load_events(self, now: Optional[datetime] = None) -> list[CalendarEvent]:
        """Query the store for the window around *now* and apply the result."""
        now = now or datetime.now()
        window = timedelta(days=self.window_days)
        events = await asyncio.to_thread(self._query, now - window, now + window)
        self._events = list(events)
        logger.debug("Loaded {} calendar events", len(events))
        self._publish()
        return self.events

    async def add_event(
        self,
        title: str,
        start: datetime,
        end: datetime,
        is_all_day: bool = False,
        notes: str = "",
    ) -> Optional[CalendarEvent]:
        """Save a new event in the default calendar and reload around the current time.

        A failed save is logged and reported as ``None``; it is not retried.
        """
        event = CalendarEvent(
            title=title,
            start=start,
            end=end,
            is_all_day=is_all_day,
            notes=notes,
            calendar=self.store.default_calendar,
        )
        try:
            await asyncio.to_thread(self.store.save, event)
        except CalendarSaveError as exc:
            logger.error("Error saving event: {}", exc)
            return None
        await self.load_events()
        return event
