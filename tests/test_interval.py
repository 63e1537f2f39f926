"""
Unit Tests for interval resolution
"""
import pytest

from periodlib.conventions.types import IntervalKind
from periodlib.schedule.interval import resolve_interval_days
from periodlib.schema.config import PeriodicityConfig


def _config(kind, days=None, months=None):
    return PeriodicityConfig(
        reference_start_date="2025-01-01",
        interval_kind=kind,
        custom_interval_days=days,
        custom_interval_months=months,
    )


class TestFixedKinds:
    """Fixed cadences map to calendar-day constants"""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (IntervalKind.BIMONTHLY, 60),
            (IntervalKind.QUARTERLY, 90),
            (IntervalKind.SEMIANNUAL, 180),
            (IntervalKind.ANNUAL, 360),
        ],
    )
    def test_fixed_kind_days(self, kind, expected):
        assert resolve_interval_days(_config(kind)) == expected

    def test_fixed_kind_ignores_custom_values(self):
        """Custom lengths only apply under CUSTOM"""
        assert resolve_interval_days(_config(IntervalKind.ANNUAL, days=5, months=2)) == 360


class TestCustomKind:
    """CUSTOM prefers days, then months * 30, then 180"""

    def test_custom_days_preferred(self):
        assert resolve_interval_days(_config(IntervalKind.CUSTOM, days=45, months=3)) == 45

    def test_custom_months_fallback(self):
        assert resolve_interval_days(_config(IntervalKind.CUSTOM, months=4)) == 120

    def test_zero_days_falls_back_to_months(self):
        assert resolve_interval_days(_config(IntervalKind.CUSTOM, days=0, months=2)) == 60

    @pytest.mark.parametrize(
        "days,months", [(None, None), (0, 0), (-3, None), (None, -1), (-10, -10)]
    )
    def test_unresolvable_custom_defaults_to_180(self, days, months):
        assert resolve_interval_days(_config(IntervalKind.CUSTOM, days, months)) == 180

    def test_result_is_always_positive(self):
        for kind in IntervalKind:
            assert resolve_interval_days(_config(kind)) > 0
