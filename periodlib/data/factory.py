"""
Factory for creating config sources.
"""

from enum import Enum
from pathlib import Path

from .base import ConfigSource
from .filters import EntityTypeFilter
from .loaders import JSONConfigSource, PostgreSQLConfigSource


class ConfigSourceType(Enum):
    """Supported config source types."""
    POSTGRESQL = "postgresql"
    JSON = "json"


def create_config_source(source_type: ConfigSourceType, **kwargs) -> ConfigSource:
    """
    Create a config source.

    Args:
        source_type: Type of config source to create
        **kwargs: ``path`` for JSON; connection settings and ``table`` for
            PostgreSQL; optional ``entity_types`` for either

    Returns:
        Configured config source

    Examples:
        >>> source = create_config_source(ConfigSourceType.JSON, path="configs.json")
        >>> source = create_config_source(
        ...     ConfigSourceType.POSTGRESQL, host="localhost", port=5432
        ... )
    """
    entity_types = kwargs.pop("entity_types", None)

    if source_type == ConfigSourceType.JSON:
        if "path" not in kwargs:
            raise ValueError("JSON config source requires 'path'")
        source = JSONConfigSource(Path(kwargs.pop("path")))
    elif source_type == ConfigSourceType.POSTGRESQL:
        source = PostgreSQLConfigSource(**kwargs)
    else:
        raise ValueError(f"Unsupported config source type: {source_type}")

    if entity_types is not None:
        source.add_filter(EntityTypeFilter(entity_types))
    return source
