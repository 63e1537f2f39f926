"""
Reminder ledger: which lead-day reminders were already sent per cycle.

Keys are (tenant, entity type, period start, lead days). The ledger is reset
as a unit per tenant and entity type, for instance after an administrator
changes the cadence.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, Set, Union, runtime_checkable

from periodlib.conventions.types import EntityType
from periodlib.data.loaders import connect_postgres, postgres_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReminderKey:
    tenant_id: str
    entity_type: EntityType
    period_start: date
    lead_days: int


@runtime_checkable
class ReminderLedger(Protocol):
    """Protocol for reminder ledgers."""

    def has_sent(self, key: ReminderKey) -> bool:
        ...

    def mark_sent(self, key: ReminderKey) -> None:
        ...

    def reset(self, tenant_id: str, entity_type: EntityType) -> int:
        """Delete every row for the pair and return how many were removed."""
        ...


class InMemoryReminderLedger:
    """Process-local ledger backed by a set."""

    def __init__(self):
        self._sent: Set[ReminderKey] = set()

    def __len__(self) -> int:
        return len(self._sent)

    def has_sent(self, key: ReminderKey) -> bool:
        return key in self._sent

    def mark_sent(self, key: ReminderKey) -> None:
        self._sent.add(key)

    def reset(self, tenant_id: str, entity_type: EntityType) -> int:
        matching = {
            k for k in self._sent
            if k.tenant_id == tenant_id and k.entity_type == entity_type
        }
        self._sent -= matching
        return len(matching)


class PostgreSQLReminderLedger:
    """
    Ledger stored in the ``periodicity_reminder_sent`` table.

    Connection settings default to the POSTGRES_* environment variables.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
        table: str = "periodicity_reminder_sent",
    ):
        self.config = postgres_settings(host, port, user, password, database)
        self.table = table

    def _execute(self, query: str, params: tuple, fetch: bool = False):
        conn = connect_postgres(self.config)
        try:
            with conn.cursor() as cur:
                cur.execute(query, params)
                result = cur.fetchone() if fetch else cur.rowcount
            conn.commit()
            return result
        finally:
            conn.close()

    @staticmethod
    def _params(key: ReminderKey) -> tuple:
        return (key.tenant_id, key.entity_type.value, key.period_start, key.lead_days)

    def has_sent(self, key: ReminderKey) -> bool:
        row = self._execute(
            f"""
            SELECT 1 FROM {self.table}
            WHERE tenant_id = %s AND entity_type = %s
              AND period_start_date = %s AND lead_days = %s
            LIMIT 1
            """,
            self._params(key),
            fetch=True,
        )
        return row is not None

    def mark_sent(self, key: ReminderKey) -> None:
        self._execute(
            f"""
            INSERT INTO {self.table} (tenant_id, entity_type, period_start_date, lead_days)
            VALUES (%s, %s, %s, %s)
            ON CONFLICT DO NOTHING
            """,
            self._params(key),
        )

    def reset(self, tenant_id: str, entity_type: EntityType) -> int:
        return self._execute(
            f"DELETE FROM {self.table} WHERE tenant_id = %s AND entity_type = %s",
            (tenant_id, entity_type.value),
        )


def reset_reminders(
    ledger: ReminderLedger, tenant_id: str, entity_type: Union[EntityType, str]
) -> int:
    """
    Clear every sent-reminder row for a tenant and entity type.

    Raises:
        ValueError: If ``entity_type`` is not a known entity or ``tenant_id`` is empty
    """
    if not tenant_id:
        raise ValueError("tenant_id is required")
    try:
        entity = EntityType(entity_type)
    except ValueError:
        raise ValueError(
            f"entity_type must be one of "
            f"{', '.join(e.value for e in EntityType)}: {entity_type!r}"
        ) from None

    removed = ledger.reset(tenant_id, entity)
    logger.info(
        "Reset %s periodicity reminders for tenant %s (%s)", removed, tenant_id, entity.value
    )
    return removed
