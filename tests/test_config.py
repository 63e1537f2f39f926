"""
Unit Tests for periodicity configuration records
Tests for: row parsing, lead days, administrator validation
"""
from datetime import date

import pytest

from periodlib.conventions.defaults import DEFAULT_LEAD_DAYS
from periodlib.conventions.types import EntityType, IntervalKind
from periodlib.schedule.interval import resolve_interval_days
from periodlib.schema.config import PeriodicityConfig, parse_lead_days, validate_config


def _row(**overrides):
    row = {
        "id": "cfg-1",
        "tenant_id": "tenant-a",
        "entity_type": "assessment",
        "interval_kind": "custom",
        "custom_interval_days": 45,
        "custom_interval_months": None,
        "reference_start_date": "2025-03-10",
        "notification_lead_days": [30, 7],
    }
    row.update(overrides)
    return row


class TestFromRow:
    """Building configs from persisted rows"""

    def test_parses_full_row(self):
        config = PeriodicityConfig.from_row(_row())

        assert config.tenant_id == "tenant-a"
        assert config.entity_type == EntityType.ASSESSMENT
        assert config.interval_kind == IntervalKind.CUSTOM
        assert config.custom_interval_days == 45
        assert config.reference_date == date(2025, 3, 10)
        assert config.notification_lead_days == (7, 30)

    def test_unknown_interval_kind_resolves_to_default(self):
        config = PeriodicityConfig.from_row(_row(interval_kind="weekly"))

        assert config.interval_kind == IntervalKind.CUSTOM
        assert config.custom_interval_days is None
        assert resolve_interval_days(config) == 180

    def test_unknown_entity_type_left_unkeyed(self):
        config = PeriodicityConfig.from_row(_row(entity_type="onboarding"))

        assert config.entity_type is None
        assert config.tenant_id == "tenant-a"

    def test_malformed_reference_kept_as_is(self):
        config = PeriodicityConfig.from_row(_row(reference_start_date="2025-13-01"))

        assert config.reference_start_date == "2025-13-01"
        assert config.reference_date is None

    def test_numeric_strings_are_coerced(self):
        config = PeriodicityConfig.from_row(_row(custom_interval_days="21"))
        assert config.custom_interval_days == 21

    def test_round_trip_through_to_row(self):
        config = PeriodicityConfig.from_row(_row())
        again = PeriodicityConfig.from_row(config.to_row())

        assert again == config

    def test_to_row_renders_date(self):
        config = PeriodicityConfig(reference_start_date=date(2025, 1, 5))
        assert config.to_row()["reference_start_date"] == "2025-01-05"


class TestLeadDays:
    def test_keeps_positive_integers_sorted(self):
        assert parse_lead_days([14, 7, 7, -1, 0, "30", 2.5, True]) == (7, 14)

    @pytest.mark.parametrize("value", [None, [], "7,14", [0, -5]])
    def test_falls_back_to_defaults(self, value):
        assert parse_lead_days(value) == DEFAULT_LEAD_DAYS


class TestValidateConfig:
    """Administrator form validation"""

    def test_valid_custom_config(self):
        validate_config(PeriodicityConfig.from_row(_row()))

    def test_missing_reference_date(self):
        with pytest.raises(ValueError, match="required"):
            validate_config(PeriodicityConfig(reference_start_date="  "))

    def test_invalid_reference_date(self):
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            validate_config(PeriodicityConfig(reference_start_date="10/03/2025"))

    def test_custom_requires_days_or_months(self):
        config = PeriodicityConfig(
            reference_start_date="2025-01-01", interval_kind=IntervalKind.CUSTOM
        )
        with pytest.raises(ValueError, match="custom interval requires"):
            validate_config(config)

    def test_custom_days_upper_bound(self):
        config = PeriodicityConfig.from_row(_row(custom_interval_days=366))
        with pytest.raises(ValueError, match="custom_interval_days"):
            validate_config(config)

    def test_custom_months_upper_bound(self):
        config = PeriodicityConfig.from_row(
            _row(custom_interval_days=None, custom_interval_months=25)
        )
        with pytest.raises(ValueError, match="custom_interval_months"):
            validate_config(config)

    def test_requires_lead_days(self):
        config = PeriodicityConfig(
            reference_start_date="2025-01-01", notification_lead_days=()
        )
        with pytest.raises(ValueError, match="lead day"):
            validate_config(config)
