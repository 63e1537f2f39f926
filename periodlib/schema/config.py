"""
Tenant periodicity configuration records.

A ``PeriodicityConfig`` is owned by tenant administration (one per tenant and
entity type) and read on every classification call. Persisted rows may carry
malformed values; ``from_row`` keeps them as-is where the engine knows how to
degrade and normalises the rest.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Tuple, Union

from periodlib.conventions.defaults import (
    DEFAULT_LEAD_DAYS,
    MAX_CUSTOM_DAYS,
    MAX_CUSTOM_MONTHS,
    MIN_CUSTOM_DAYS,
    MIN_CUSTOM_MONTHS,
)
from periodlib.conventions.types import EntityType, IntervalKind
from periodlib.utils.date import DATE_FMT, parse_reference_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodicityConfig:
    """Recurring cadence anchored to a reference calendar date.

    Attributes:
        reference_start_date: Anchor of period index 0, either a ``date`` or the
            persisted ``YYYY-MM-DD`` string (possibly malformed)
        interval_kind: Fixed cadence or CUSTOM
        custom_interval_days: Length in days, used only under CUSTOM
        custom_interval_months: Length in months, fallback under CUSTOM
        tenant_id: Owning tenant, if known
        entity_type: Gated entity, if known
        notification_lead_days: Days before a window starts when reminders fire
    """

    reference_start_date: Union[date, str, None]
    interval_kind: IntervalKind = IntervalKind.SEMIANNUAL
    custom_interval_days: Optional[int] = None
    custom_interval_months: Optional[int] = None
    tenant_id: Optional[str] = None
    entity_type: Optional[EntityType] = None
    notification_lead_days: Tuple[int, ...] = field(default=DEFAULT_LEAD_DAYS)

    @property
    def reference_date(self) -> Optional[date]:
        """Parsed anchor date, or None when the stored value is not a valid date."""
        return parse_reference_date(self.reference_start_date)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PeriodicityConfig":
        """Build a config from a persisted ``periodicity_config`` row."""
        kind_value = row.get("interval_kind")
        try:
            interval_kind = IntervalKind(kind_value)
        except ValueError:
            logger.warning(
                "Unknown interval kind %r for tenant %s; resolving as default",
                kind_value,
                row.get("tenant_id"),
            )
            interval_kind = IntervalKind.CUSTOM
            row = {**row, "custom_interval_days": None, "custom_interval_months": None}

        entity_value = row.get("entity_type")
        try:
            entity_type = EntityType(entity_value) if entity_value is not None else None
        except ValueError:
            logger.warning(
                "Unknown entity type %r for tenant %s; config left unkeyed",
                entity_value,
                row.get("tenant_id"),
            )
            entity_type = None

        return cls(
            reference_start_date=row.get("reference_start_date"),
            interval_kind=interval_kind,
            custom_interval_days=_optional_int(row.get("custom_interval_days")),
            custom_interval_months=_optional_int(row.get("custom_interval_months")),
            tenant_id=None if row.get("tenant_id") is None else str(row["tenant_id"]),
            entity_type=entity_type,
            notification_lead_days=parse_lead_days(row.get("notification_lead_days")),
        )

    def to_row(self) -> dict:
        """Inverse of ``from_row``; dates rendered as ``YYYY-MM-DD``."""
        reference = self.reference_start_date
        if isinstance(reference, date):
            reference = reference.strftime(DATE_FMT)
        return {
            "tenant_id": self.tenant_id,
            "entity_type": self.entity_type.value if self.entity_type else None,
            "interval_kind": self.interval_kind.value,
            "custom_interval_days": self.custom_interval_days,
            "custom_interval_months": self.custom_interval_months,
            "reference_start_date": reference,
            "notification_lead_days": list(self.notification_lead_days),
        }


def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return None


def parse_lead_days(values: Any) -> Tuple[int, ...]:
    """Keep positive integer lead days; anything else falls back to the defaults."""
    if not isinstance(values, (list, tuple)):
        return DEFAULT_LEAD_DAYS
    days = [
        v for v in values if isinstance(v, int) and not isinstance(v, bool) and v > 0
    ]
    return tuple(sorted(set(days))) if days else DEFAULT_LEAD_DAYS


def validate_config(config: PeriodicityConfig) -> None:
    """
    Check a config the way the administrator form does before saving.

    The engine itself never calls this; it degrades permissively on bad data.

    Raises:
        ValueError: If the reference date is missing or invalid, the custom
            interval is out of bounds, or no lead day is configured
    """
    if config.reference_start_date is None or (
        isinstance(config.reference_start_date, str)
        and not config.reference_start_date.strip()
    ):
        raise ValueError("reference_start_date is required")
    if config.reference_date is None:
        raise ValueError(
            f"reference_start_date must be a YYYY-MM-DD date: "
            f"{config.reference_start_date!r}"
        )

    if config.interval_kind == IntervalKind.CUSTOM:
        days = config.custom_interval_days or 0
        months = config.custom_interval_months or 0
        if days < 1 and months < 1:
            raise ValueError(
                f"custom interval requires days ({MIN_CUSTOM_DAYS}-{MAX_CUSTOM_DAYS}) "
                f"or months ({MIN_CUSTOM_MONTHS}-{MAX_CUSTOM_MONTHS})"
            )
        if days > 0 and not MIN_CUSTOM_DAYS <= days <= MAX_CUSTOM_DAYS:
            raise ValueError(
                f"custom_interval_days must be between {MIN_CUSTOM_DAYS} and {MAX_CUSTOM_DAYS}"
            )
        if months > 0 and not MIN_CUSTOM_MONTHS <= months <= MAX_CUSTOM_MONTHS:
            raise ValueError(
                f"custom_interval_months must be between {MIN_CUSTOM_MONTHS} and {MAX_CUSTOM_MONTHS}"
            )

    if not config.notification_lead_days:
        raise ValueError("at least one notification lead day is required")
