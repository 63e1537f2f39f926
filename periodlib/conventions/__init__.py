# Re-export convention types and defaults
from .defaults import (
    DAYS_PER_MONTH,
    DEFAULT_INTERVAL_DAYS,
    DEFAULT_LEAD_DAYS,
    INTERVAL_DAYS,
)
from .types import EntityType, IntervalKind, PeriodStatus
