"""
Default settings for interval resolution, reminders and validation.
"""

from .types import IntervalKind

# Calendar-day approximations, not astronomical lengths
INTERVAL_DAYS = {
    IntervalKind.BIMONTHLY: 60,
    IntervalKind.QUARTERLY: 90,
    IntervalKind.SEMIANNUAL: 180,
    IntervalKind.ANNUAL: 360,
}

DAYS_PER_MONTH = 30
DEFAULT_INTERVAL_DAYS = 180

DEFAULT_LEAD_DAYS = (7, 14, 30)

# Administrator form bounds for custom cadences
MIN_CUSTOM_DAYS = 1
MAX_CUSTOM_DAYS = 365
MIN_CUSTOM_MONTHS = 1
MAX_CUSTOM_MONTHS = 24
