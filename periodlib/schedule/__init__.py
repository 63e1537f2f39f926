# Re-export schedule components
from periodlib.conventions.types import IntervalKind, PeriodStatus

from .core import CurrentWindow, PeriodStatusResult, PeriodWindow
from .interval import resolve_interval_days
from .table import classify_many, window_table
from .window import (
    UNRESTRICTED,
    classify,
    compute_current_window,
    is_within_window,
    upcoming_window,
    window_at_index,
)
