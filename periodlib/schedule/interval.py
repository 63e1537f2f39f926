"""
Interval resolution: cadence descriptor to a whole number of days.
"""

import logging

from periodlib.conventions.defaults import DAYS_PER_MONTH, DEFAULT_INTERVAL_DAYS
from periodlib.conventions.types import IntervalKind
from periodlib.schema.config import PeriodicityConfig

logger = logging.getLogger(__name__)


def _positive(value) -> bool:
    return value is not None and value > 0


def resolve_interval_days(config: PeriodicityConfig) -> int:
    """
    Resolve the effective window length in days.

    Fixed kinds map to calendar-day constants. CUSTOM prefers
    ``custom_interval_days``, then ``custom_interval_months * 30``, then the
    180-day default. Always returns a positive integer.
    """
    kind = config.interval_kind
    if kind != IntervalKind.CUSTOM:
        days = kind.days()
        if days > 0:
            return days
        logger.debug("No day count for interval kind %s; using default", kind)
        return DEFAULT_INTERVAL_DAYS

    if _positive(config.custom_interval_days):
        return int(config.custom_interval_days)
    if _positive(config.custom_interval_months):
        return int(config.custom_interval_months) * DAYS_PER_MONTH

    logger.debug(
        "Custom interval unresolvable for tenant %s; defaulting to %s days",
        config.tenant_id,
        DEFAULT_INTERVAL_DAYS,
    )
    return DEFAULT_INTERVAL_DAYS
