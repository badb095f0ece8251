"""Version counter and listener fan-out shared by the state containers."""

from __future__ import annotations

import threading
from typing import Callable

from loguru import logger

Listener = Callable[[int], None]


class Observable:
    """Mixin giving a container an explicit, monotonically increasing version.

    Presentation code subscribes a callback and re-reads the container when
    the callback fires, instead of relying on framework change tracking.
    """

    def __init__(self) -> None:
        self._version = 0
        self._version_lock = threading.Lock()
        self._listeners: list[Listener] = []

    @property
    def version(self) -> int:
        return self._version

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that removes it again."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self) -> int:
        with self._version_lock:
            self._version += 1
            version = self._version
        for listener in list(self._listeners):
            try:
                listener(version)
            except Exception:
                logger.exception("Error in {} listener", type(self).__name__)
        return version
