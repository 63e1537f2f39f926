"""
Base abstractions for configuration loading.

Defines interfaces for periodicity configuration sources and config filters.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Union, runtime_checkable

from periodlib.conventions.types import EntityType
from periodlib.schema.config import PeriodicityConfig


@runtime_checkable
class ConfigSource(Protocol):
    """
    Protocol for periodicity configuration sources.

    Configs are keyed by (tenant, entity type). A missing config means the
    entity has no periodicity restriction.
    """

    def load_config(
        self, tenant_id: str, entity_type: Union[EntityType, str]
    ) -> Optional[PeriodicityConfig]:
        """
        Load the config for one tenant and entity type.

        Args:
            tenant_id: Owning tenant
            entity_type: Gated entity (enum or its string value)

        Returns:
            The config, or None when none is stored
        """
        ...

    def load_all(self) -> List[PeriodicityConfig]:
        """Load every stored config."""
        ...


@runtime_checkable
class ConfigFilter(Protocol):
    """Protocol for filtering loaded configs."""

    def filter(self, configs: List[PeriodicityConfig]) -> List[PeriodicityConfig]:
        ...


class BaseConfigSource(ABC):
    """
    Abstract base class for config sources.

    Subclasses only fetch rows; lookup by key and filtering live here.
    """

    def __init__(self):
        self._filters: List[ConfigFilter] = []

    def add_filter(self, filter_instance: ConfigFilter) -> None:
        """
        Add a filter to be applied when loading configs.

        Args:
            filter_instance: Filter to add
        """
        self._filters.append(filter_instance)

    def _apply_filters(self, configs: List[PeriodicityConfig]) -> List[PeriodicityConfig]:
        result = configs
        for filter_instance in self._filters:
            result = filter_instance.filter(result)
        return result

    @abstractmethod
    def _fetch_rows(self) -> List[dict]:
        """Fetch raw ``periodicity_config`` rows (to be implemented by subclasses)."""
        pass

    def load_all(self) -> List[PeriodicityConfig]:
        configs = [PeriodicityConfig.from_row(row) for row in self._fetch_rows()]
        return self._apply_filters(configs)

    def load_config(
        self, tenant_id: str, entity_type: Union[EntityType, str]
    ) -> Optional[PeriodicityConfig]:
        entity = EntityType(entity_type)
        for config in self.load_all():
            if config.tenant_id == str(tenant_id) and config.entity_type == entity:
                return config
        return None
