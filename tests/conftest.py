"""Shared fixtures for periodicity tests."""
from datetime import date

import pytest

from periodlib.conventions.types import EntityType, IntervalKind
from periodlib.schema.config import PeriodicityConfig


@pytest.fixture
def daily_config() -> PeriodicityConfig:
    """Custom one-day cadence anchored at 2025-02-01"""
    return PeriodicityConfig(
        reference_start_date="2025-02-01",
        interval_kind=IntervalKind.CUSTOM,
        custom_interval_days=1,
        custom_interval_months=None,
    )


@pytest.fixture
def quarterly_config() -> PeriodicityConfig:
    return PeriodicityConfig(
        reference_start_date=date(2025, 1, 1),
        interval_kind=IntervalKind.QUARTERLY,
        tenant_id="tenant-a",
        entity_type=EntityType.EVALUATION,
        notification_lead_days=(7, 14, 30),
    )


@pytest.fixture
def broken_config() -> PeriodicityConfig:
    return PeriodicityConfig(
        reference_start_date="not-a-date",
        interval_kind=IntervalKind.SEMIANNUAL,
        tenant_id="tenant-b",
        entity_type=EntityType.ASSESSMENT,
    )
