"""
Window computation, status classification and the duplicate predicate.

All arithmetic runs on calendar dates. The anchor is the configured reference
date, windows are ``anchor + k * interval`` days for integer ``k`` and
boundaries become instants only at local midnight, so daylight-saving shifts
never move a boundary.
"""

import logging
from datetime import date
from typing import Optional

from periodlib.conventions.types import PeriodStatus
from periodlib.schema.config import PeriodicityConfig
from periodlib.utils.date import DateLike, add_days, at_local_midnight, to_date, to_datetime

from .core import CurrentWindow, PeriodStatusResult, PeriodWindow
from .interval import resolve_interval_days

logger = logging.getLogger(__name__)

# Returned whenever the configuration cannot restrict anything
UNRESTRICTED = PeriodStatusResult(status=PeriodStatus.WITHIN)


def window_at_index(anchor: date, interval_days: int, period_index: int) -> PeriodWindow:
    """Window number ``period_index`` counted from the anchor (may be negative)."""
    period_start = add_days(anchor, period_index * interval_days)
    return PeriodWindow.from_dates(period_start, add_days(period_start, interval_days))


def compute_current_window(
    config: PeriodicityConfig, instant: DateLike
) -> Optional[CurrentWindow]:
    """
    Locate the window containing ``instant``'s calendar date.

    Uses floor division over elapsed calendar days, so instants before the
    anchor resolve to a negative-indexed window rather than failing; callers
    that care about "before anchor" go through ``classify``.

    Returns:
        The anchor and window, or None when the reference date is not a valid
        calendar date
    """
    anchor = config.reference_date
    if anchor is None:
        return None

    interval_days = resolve_interval_days(config)
    elapsed_days = (to_date(instant) - anchor).days
    period_index = elapsed_days // interval_days

    window = window_at_index(anchor, interval_days, period_index)
    logger.debug(
        "Window %s for %s: [%s, %s)",
        period_index,
        instant,
        window.period_start,
        window.period_end,
    )
    return CurrentWindow(
        anchor_at=at_local_midnight(anchor),
        period_index=period_index,
        window=window,
    )


def classify(config: PeriodicityConfig, instant: DateLike) -> PeriodStatusResult:
    """
    Classify ``instant`` as BEFORE, WITHIN or AFTER the schedule.

    An unparseable reference date fails open: WITHIN with no window, so a
    misconfigured tenant never locks users out.
    """
    at = to_datetime(instant)
    located = compute_current_window(config, at)
    if located is None:
        logger.warning(
            "Unparseable reference_start_date %r for tenant %s; not restricting",
            config.reference_start_date,
            config.tenant_id,
        )
        return UNRESTRICTED

    window = located.window
    if at < located.anchor_at:
        return PeriodStatusResult(
            status=PeriodStatus.BEFORE,
            next_period_start=located.anchor,
            next_period_start_at=located.anchor_at,
        )

    if located.anchor_at <= at < window.period_end_at:
        return PeriodStatusResult(
            status=PeriodStatus.WITHIN,
            current_window=window,
            next_period_start=window.period_end,
            next_period_start_at=window.period_end_at,
        )

    # Unreachable under floor division: every instant past the anchor lands in some window
    return PeriodStatusResult(
        status=PeriodStatus.AFTER,
        next_period_start=window.period_end,
        next_period_start_at=window.period_end_at,
    )


def is_within_window(
    config: Optional[PeriodicityConfig],
    completion_instant: DateLike,
    now: Optional[DateLike] = None,
) -> bool:
    """
    Duplicate-prevention predicate: True when ``completion_instant`` lies in
    the current cycle, so a second submission should be blocked.

    The current cycle is the window containing ``now`` (defaults to the
    completion instant itself). Membership is the strict [start, end) test.
    No config, or a config that cannot be resolved, never restricts and
    yields True.
    """
    if config is None:
        return True

    at = to_datetime(completion_instant)
    reference = at if now is None else to_datetime(now)
    result = classify(config, reference)
    if result.status != PeriodStatus.WITHIN:
        return False
    if result.current_window is None:
        return True

    window = result.current_window
    return window.period_start_at <= at < window.period_end_at


def upcoming_window(
    config: PeriodicityConfig, today: DateLike
) -> Optional[PeriodWindow]:
    """
    First window starting on or after ``today``'s calendar date.

    Before the anchor this is the anchor window. None when the reference
    date is not a valid calendar date.
    """
    anchor = config.reference_date
    if anchor is None:
        return None

    day = to_date(today)
    if day <= anchor:
        return window_at_index(anchor, resolve_interval_days(config), 0)

    located = compute_current_window(config, day)
    window = located.window
    if window.period_start == day:
        return window
    return window.next_window()
