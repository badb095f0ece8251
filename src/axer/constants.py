STATE_DIR_NAME = ".axer"
CONFIG_FILE = "config.yaml"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_THEME = "system"
DEFAULT_CALENDAR_WINDOW_DAYS = 30  # events loaded this many days either side of now
DEFAULT_EVENT_DURATION_MINUTES = 60
DEFAULT_GOAL_DURATION_DAYS = 30

# Weekday numbering follows the platform calendar: Sunday = 1.
ALL_WEEKDAYS = (1, 2, 3, 4, 5, 6, 7)

ITEM_KIND_HABIT = "habit"
ITEM_KIND_TODO = "todo"
ITEM_KIND_EVENT = "event"
ITEM_KINDS = (ITEM_KIND_HABIT, ITEM_KIND_TODO, ITEM_KIND_EVENT)
