"""Configure loguru and format engine objects for log lines."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from .constants import DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure the loguru logger with a single stderr sink.

    Args:
        level: Minimum level name, case-insensitive.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{module}</cyan>:<cyan>{line}</cyan>\n"
            "{message}"
        ),
    )


def summarize_task(task: Any) -> dict[str, Any]:
    """Render a compact, JSON-friendly summary of a task item.

    Args:
        task: Task item instance (or None).

    Returns:
        A dictionary suitable for logging.
    """
    if task is None:
        return {"task": None}

    title = str(getattr(task, "title", "") or "")
    d: dict[str, Any] = {
        "id": getattr(task, "id", None),
        "title": (title[:60] + "…") if len(title) > 60 else title,
        "completed": bool(getattr(task, "is_completed", False)),
    }
    time_label = getattr(task, "time", "")
    if time_label:
        d["time"] = time_label
    position = getattr(task, "original_position", None)
    if position is not None:
        d["original_position"] = position
    return d
