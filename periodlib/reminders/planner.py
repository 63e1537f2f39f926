"""
Lead-day reminder planning.

Decides which reminders are due for the upcoming window of each config.
Delivery is left to the caller, which marks each reminder in the ledger once
it has been sent.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

from periodlib.schedule.core import PeriodWindow
from periodlib.schedule.window import upcoming_window
from periodlib.schema.config import PeriodicityConfig
from periodlib.utils.date import DateLike, add_days, to_date

from .ledger import ReminderKey, ReminderLedger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReminderDue:
    config: PeriodicityConfig
    window: PeriodWindow
    lead_days: int
    reminder_date: date

    @property
    def key(self) -> ReminderKey:
        return ReminderKey(
            tenant_id=self.config.tenant_id,
            entity_type=self.config.entity_type,
            period_start=self.window.period_start,
            lead_days=self.lead_days,
        )


def due_reminders(config: PeriodicityConfig, today: DateLike) -> List[ReminderDue]:
    """
    Reminders due ``today`` for the upcoming window of ``config``.

    A reminder with lead ``n`` is due from ``period_start - n`` days up to and
    including ``period_start``.
    """
    window = upcoming_window(config, today)
    if window is None:
        return []

    day = to_date(today)
    due = []
    for lead_days in config.notification_lead_days:
        reminder_date = add_days(window.period_start, -lead_days)
        if reminder_date <= day <= window.period_start:
            due.append(ReminderDue(config, window, lead_days, reminder_date))
    return due


def plan_reminders(
    configs: Iterable[PeriodicityConfig], today: DateLike, ledger: ReminderLedger
) -> List[ReminderDue]:
    """Due reminders across ``configs`` that the ledger has not recorded yet."""
    planned = []
    for config in configs:
        if config.tenant_id is None or config.entity_type is None:
            logger.debug("Skipping config without tenant or entity type: %s", config)
            continue
        for reminder in due_reminders(config, today):
            if ledger.has_sent(reminder.key):
                continue
            planned.append(reminder)
    logger.debug("Planned %s periodicity reminders for %s", len(planned), today)
    return planned
