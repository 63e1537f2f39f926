"""
Config filtering strategies.
"""

from typing import Iterable, List, Union

from periodlib.conventions.types import EntityType
from periodlib.schema.config import PeriodicityConfig


class EntityTypeFilter:
    """Keep configs for the given entity types only."""

    def __init__(self, entity_types: Iterable[Union[EntityType, str]]):
        self.entity_types = {EntityType(e) for e in entity_types}

    def filter(self, configs: List[PeriodicityConfig]) -> List[PeriodicityConfig]:
        return [c for c in configs if c.entity_type in self.entity_types]


class ReminderEnabledFilter:
    """Keep configs that can produce reminders (tenant, entity and lead days set)."""

    def filter(self, configs: List[PeriodicityConfig]) -> List[PeriodicityConfig]:
        return [
            c
            for c in configs
            if c.tenant_id is not None
            and c.entity_type is not None
            and c.notification_lead_days
        ]
