from .ledger import (
    InMemoryReminderLedger,
    PostgreSQLReminderLedger,
    ReminderKey,
    ReminderLedger,
    reset_reminders,
)
from .planner import ReminderDue, due_reminders, plan_reminders

__all__ = [
    "ReminderKey",
    "ReminderLedger",
    "InMemoryReminderLedger",
    "PostgreSQLReminderLedger",
    "reset_reminders",
    "ReminderDue",
    "due_reminders",
    "plan_reminders",
]
