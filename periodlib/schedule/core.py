"""
Core data structures for periodicity windows.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from periodlib.conventions.types import PeriodStatus
from periodlib.utils.date import add_days, at_local_midnight


@dataclass(frozen=True)
class PeriodWindow:
    """Half-open window [period_start_at, period_end_at) over local instants."""

    period_start: date
    period_end: date
    period_start_at: datetime
    period_end_at: datetime

    @classmethod
    def from_dates(cls, period_start: date, period_end: date) -> "PeriodWindow":
        """Build a window whose instants sit at local midnight of its dates."""
        return cls(
            period_start=period_start,
            period_end=period_end,
            period_start_at=at_local_midnight(period_start),
            period_end_at=at_local_midnight(period_end),
        )

    @property
    def interval_days(self) -> int:
        """Number of calendar days in the window."""
        return (self.period_end - self.period_start).days

    def contains(self, instant: datetime) -> bool:
        """Inclusive start, exclusive end."""
        return self.period_start_at <= instant < self.period_end_at

    def next_window(self) -> "PeriodWindow":
        return PeriodWindow.from_dates(
            self.period_end, add_days(self.period_end, self.interval_days)
        )

    def previous_window(self) -> "PeriodWindow":
        return PeriodWindow.from_dates(
            add_days(self.period_start, -self.interval_days), self.period_start
        )


@dataclass(frozen=True)
class CurrentWindow:
    """Window located for an instant, with the anchor it was offset from."""

    anchor_at: datetime
    period_index: int
    window: PeriodWindow

    @property
    def anchor(self) -> date:
        return self.anchor_at.date()


@dataclass(frozen=True)
class PeriodStatusResult:
    """Classification of an instant against a schedule.

    Attributes:
        status: BEFORE, WITHIN or AFTER
        current_window: Window containing the instant (None when the schedule
            has not started or the configuration is unusable)
        next_period_start: Calendar date the next window begins
        next_period_start_at: Same boundary as a local-midnight instant
    """

    status: PeriodStatus
    current_window: Optional[PeriodWindow] = None
    next_period_start: Optional[date] = None
    next_period_start_at: Optional[datetime] = None

    @property
    def is_within(self) -> bool:
        return self.status == PeriodStatus.WITHIN
