"""Load optional application configuration from `.axer/config.yaml`."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import (
    CONFIG_FILE,
    DEFAULT_CALENDAR_WINDOW_DAYS,
    DEFAULT_EVENT_DURATION_MINUTES,
    DEFAULT_LOG_LEVEL,
    DEFAULT_THEME,
    STATE_DIR_NAME,
)
from .io_utils import _load_data_with_error
from .theme import AppTheme


# loguru's built-in level names
LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class AppConfig(BaseModel):
    """Application settings."""

    log_level: LogLevel = DEFAULT_LOG_LEVEL
    theme: AppTheme = AppTheme(DEFAULT_THEME)
    calendar_window_days: int = Field(default=DEFAULT_CALENDAR_WINDOW_DAYS, ge=1)
    event_duration_minutes: int = Field(default=DEFAULT_EVENT_DURATION_MINUTES, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def config_path(project_dir: Path) -> Path:
    return project_dir.resolve() / STATE_DIR_NAME / CONFIG_FILE


def load_app_config(project_dir: Path) -> tuple[AppConfig, str | None]:
    """Load the optional config file.

    Args:
        project_dir: Directory holding the `.axer/` state directory.

    Returns:
        A tuple of `(config, error_message)`. A missing file yields defaults
        and no error; unreadable or invalid content yields defaults and a
        message describing the problem.
    """
    path = config_path(project_dir)
    data, err = _load_data_with_error(path, {})
    if err:
        return AppConfig(), err
    return parse_app_config(data, source=path.name)


def parse_app_config(data: dict[str, Any], source: str = CONFIG_FILE) -> tuple[AppConfig, str | None]:
    try:
        return AppConfig.model_validate(data), None
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        return AppConfig(), f"{source}: {problems}"
