"""
Configuration sources for periodicity configs.

Main APIs:
    - JSONConfigSource: configs from a JSON file
    - PostgreSQLConfigSource: configs from the periodicity_config table
    - create_config_source: factory for either
"""

from .base import BaseConfigSource, ConfigFilter, ConfigSource
from .factory import ConfigSourceType, create_config_source
from .filters import EntityTypeFilter, ReminderEnabledFilter
from .loaders import JSONConfigSource, PostgreSQLConfigSource

__all__ = [
    "ConfigSource",
    "ConfigFilter",
    "BaseConfigSource",
    "JSONConfigSource",
    "PostgreSQLConfigSource",
    "ConfigSourceType",
    "create_config_source",
    "EntityTypeFilter",
    "ReminderEnabledFilter",
]
