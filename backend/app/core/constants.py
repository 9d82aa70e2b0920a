"""Shared application constants.

The tracked week runs Monday through Saturday; Sunday is not modelled.
"""

# Scan order for progress and streaks
WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)

DEFAULT_EMOJI = "🔥"

TARGET_SPECIFIC_DAYS = "specific_days"

# Bounds for targetCount when targetType is days_per_week
MIN_TARGET_COUNT = 1
MAX_TARGET_COUNT = len(WEEKDAYS)

# Largest id an Integer primary key column can hold
MAX_ID = 2**31 - 1
