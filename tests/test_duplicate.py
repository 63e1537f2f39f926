"""
Unit Tests for the duplicate-prevention predicate
"""
from datetime import datetime, timedelta

import pytest

from periodlib.schedule.window import classify, is_within_window


class TestIsWithinWindow:
    """Half-open membership used to block a second submission per cycle"""

    def test_duplicate_prevention_matches_half_open_semantics(self, daily_config):
        window = classify(daily_config, datetime(2026, 2, 11)).current_window

        completed_inside = window.period_start_at + timedelta(minutes=1)
        completed_at_end = window.period_end_at

        now = window.period_start_at + timedelta(hours=12)

        assert is_within_window(daily_config, completed_inside, now=now) is True
        assert is_within_window(daily_config, completed_at_end, now=now) is False

    def test_completion_in_previous_cycle_is_not_blocked(self, quarterly_config):
        """A completion last cycle does not block a submission this cycle"""
        now = datetime(2025, 5, 10)

        assert is_within_window(quarterly_config, datetime(2025, 3, 31, 23, 59), now=now) is False
        assert is_within_window(quarterly_config, datetime(2025, 4, 1), now=now) is True

    def test_now_before_anchor_never_blocks(self, quarterly_config):
        now = datetime(2024, 12, 1)
        assert is_within_window(quarterly_config, datetime(2024, 11, 30), now=now) is False

    def test_no_config_with_now_is_unrestricted(self):
        assert is_within_window(None, datetime(2026, 1, 1), now=datetime(2026, 6, 1)) is True

    def test_completion_at_window_start_is_blocked(self, quarterly_config):
        assert is_within_window(quarterly_config, datetime(2025, 4, 1)) is True

    def test_completion_before_anchor_is_not_blocked(self, quarterly_config):
        assert is_within_window(quarterly_config, datetime(2024, 12, 31, 23, 0)) is False

    def test_no_config_never_blocks(self):
        assert is_within_window(None, datetime(2026, 1, 1)) is True
        assert is_within_window(None, datetime(1999, 12, 31, 23, 59)) is True

    @pytest.mark.parametrize(
        "instant",
        [datetime(1970, 1, 1), datetime(2025, 5, 1, 12), datetime(2999, 12, 31)],
    )
    def test_bad_config_fails_open(self, broken_config, instant):
        assert classify(broken_config, instant).status.value == "within"
        assert is_within_window(broken_config, instant) is True
        assert is_within_window(broken_config, instant, now=datetime(2025, 1, 1)) is True

    def test_accepts_date_strings(self, quarterly_config):
        assert is_within_window(quarterly_config, "2025-06-29") is True
