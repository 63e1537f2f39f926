"""
Basic types and enums used across the periodicity engine.
"""

from enum import Enum


class IntervalKind(Enum):
    """Recurring cadences a tenant can configure."""

    BIMONTHLY = "bimonthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    ANNUAL = "annual"
    CUSTOM = "custom"

    def days(self) -> int:
        """Calendar-day length of a fixed cadence (0 for CUSTOM)."""
        from .defaults import INTERVAL_DAYS

        return INTERVAL_DAYS.get(self, 0)


class EntityType(Enum):
    """Entities whose submissions are gated by a periodicity window."""

    EVALUATION = "evaluation"
    ASSESSMENT = "assessment"


class PeriodStatus(Enum):
    """Position of an instant relative to the schedule."""

    BEFORE = "before"
    WITHIN = "within"
    AFTER = "after"
