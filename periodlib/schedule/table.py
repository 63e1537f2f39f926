"""Vectorised window lookups for reporting over many instants."""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from periodlib.conventions.types import PeriodStatus
from periodlib.schema.config import PeriodicityConfig
from periodlib.utils.date import DateLike, to_date, to_datetime

from .interval import resolve_interval_days

CLASSIFY_COLUMNS = [
    "instant",
    "status",
    "period_index",
    "period_start",
    "period_end",
    "next_period_start",
]


def _offset_dates(anchor64: np.datetime64, days: np.ndarray) -> np.ndarray:
    return (anchor64 + days.astype("timedelta64[D]")).astype(object)


def classify_many(config: PeriodicityConfig, instants: Iterable[DateLike]) -> pd.DataFrame:
    """
    Classify many instants at once; row ``i`` matches ``classify(config, instants[i])``.

    Rows before the anchor carry no window and point ``next_period_start`` at
    the anchor. An unparseable reference date yields WITHIN rows without
    window columns.
    """
    moments = [to_datetime(i) for i in instants]
    n = len(moments)
    anchor = config.reference_date

    if anchor is None:
        empty = np.full(n, None, dtype=object)
        return pd.DataFrame(
            {
                "instant": moments,
                "status": [PeriodStatus.WITHIN.value] * n,
                "period_index": pd.Series(empty, dtype="Int64"),
                "period_start": empty,
                "period_end": empty.copy(),
                "next_period_start": empty.copy(),
            },
            columns=CLASSIFY_COLUMNS,
        )

    interval_days = resolve_interval_days(config)
    elapsed = np.array([(to_date(m) - anchor).days for m in moments], dtype=np.int64)
    index = np.floor_divide(elapsed, interval_days)
    before = elapsed < 0

    anchor64 = np.datetime64(anchor, "D")
    starts = _offset_dates(anchor64, index * interval_days)
    ends = _offset_dates(anchor64, (index + 1) * interval_days)

    return pd.DataFrame(
        {
            "instant": moments,
            "status": np.where(before, PeriodStatus.BEFORE.value, PeriodStatus.WITHIN.value),
            "period_index": pd.Series(
                np.where(before, None, index.astype(object)), dtype="Int64"
            ),
            "period_start": np.where(before, None, starts),
            "period_end": np.where(before, None, ends),
            "next_period_start": np.where(before, np.full(n, anchor, dtype=object), ends),
        },
        columns=CLASSIFY_COLUMNS,
    )


def window_table(
    config: PeriodicityConfig, start_index: int = 0, periods: int = 12
) -> pd.DataFrame:
    """
    Consecutive windows ``start_index .. start_index + periods - 1``.

    Raises:
        ValueError: If ``periods`` is negative or the reference date is invalid
    """
    if periods < 0:
        raise ValueError("periods must be non-negative")
    anchor = config.reference_date
    if anchor is None:
        raise ValueError(
            f"reference_start_date is not a valid date: {config.reference_start_date!r}"
        )

    interval_days = resolve_interval_days(config)
    index = np.arange(start_index, start_index + periods, dtype=np.int64)
    anchor64 = np.datetime64(anchor, "D")

    return pd.DataFrame(
        {
            "period_index": index,
            "period_start": _offset_dates(anchor64, index * interval_days),
            "period_end": _offset_dates(anchor64, (index + 1) * interval_days),
            "interval_days": np.full(periods, interval_days, dtype=np.int64),
        }
    )
