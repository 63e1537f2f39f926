"""Recurring periodicity window engine.

Resolves tenant-configured cadences into half-open calendar windows,
classifies instants against them and supplies the predicate used to block a
second submission inside the same cycle.

Key modules:
- schedule: interval resolution, window computation, classification
- schema: periodicity configuration records
- data: configuration sources (JSON, PostgreSQL)
- reminders: reminder ledger and lead-day planning
- utils: date coercion and display helpers
"""

__version__ = "1.0.0"

from periodlib.conventions.types import EntityType, IntervalKind, PeriodStatus
from periodlib.schedule import (
    CurrentWindow,
    PeriodStatusResult,
    PeriodWindow,
    classify,
    classify_many,
    compute_current_window,
    is_within_window,
    resolve_interval_days,
    upcoming_window,
    window_table,
)
from periodlib.schema import PeriodicityConfig, validate_config

__all__ = [
    "__version__",
    "EntityType",
    "IntervalKind",
    "PeriodStatus",
    "PeriodicityConfig",
    "validate_config",
    "PeriodWindow",
    "CurrentWindow",
    "PeriodStatusResult",
    "resolve_interval_days",
    "compute_current_window",
    "classify",
    "is_within_window",
    "upcoming_window",
    "classify_many",
    "window_table",
]
