"""
Concrete config source implementations.

Provides loaders for PostgreSQL and JSON files.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from .base import BaseConfigSource

logger = logging.getLogger(__name__)

CONFIG_COLUMNS = (
    "tenant_id",
    "entity_type",
    "interval_kind",
    "custom_interval_days",
    "custom_interval_months",
    "reference_start_date",
    "notification_lead_days",
)


def postgres_settings(
    host: Optional[str] = None,
    port: Optional[int] = None,
    user: Optional[str] = None,
    password: Optional[str] = None,
    database: Optional[str] = None,
) -> Dict:
    """Connection settings from arguments, falling back to POSTGRES_* env vars."""
    return {
        "host": host or os.getenv("POSTGRES_HOST", "localhost"),
        "port": port or int(os.getenv("POSTGRES_PORT", "5432")),
        "user": user or os.getenv("POSTGRES_USER", "postgres"),
        "password": password or os.getenv("POSTGRES_PASSWORD", ""),
        "database": database or os.getenv("POSTGRES_DB", "postgres"),
    }


def connect_postgres(config: Dict):
    """Open a psycopg2 connection; psycopg2 is an optional dependency."""
    try:
        import psycopg2
    except ImportError:
        raise ImportError(
            "psycopg2 is required for PostgreSQL sources. "
            "Install it with: pip install psycopg2-binary"
        )
    return psycopg2.connect(**config)


class PostgreSQLConfigSource(BaseConfigSource):
    """
    Load periodicity configs from PostgreSQL.

    Reads the ``periodicity_config`` table, one row per tenant and entity type.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
        table: str = "periodicity_config",
    ):
        """
        Initialize PostgreSQL config source.

        Args:
            host: Database host (defaults to env var POSTGRES_HOST)
            port: Database port (defaults to env var POSTGRES_PORT)
            user: Database user (defaults to env var POSTGRES_USER)
            password: Database password (defaults to env var POSTGRES_PASSWORD)
            database: Database name (defaults to env var POSTGRES_DB)
            table: Config table name
        """
        super().__init__()
        self.config = postgres_settings(host, port, user, password, database)
        self.table = table

    def _fetch_rows(self) -> List[Dict]:
        conn = connect_postgres(self.config)
        try:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT {', '.join(CONFIG_COLUMNS)} FROM {self.table}"
                )
                rows = [dict(zip(CONFIG_COLUMNS, row)) for row in cur.fetchall()]
        finally:
            conn.close()
        logger.debug("Fetched %s periodicity configs from %s", len(rows), self.table)
        return rows


class JSONConfigSource(BaseConfigSource):
    """
    Load periodicity configs from a JSON file.

    The file holds either a list of rows or an object with a ``"configs"``
    list. Useful for testing and for tenants configured outside the database.
    """

    def __init__(self, path: Path):
        """
        Initialize JSON config source.

        Args:
            path: JSON file with config rows

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        super().__init__()
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")

    def _fetch_rows(self) -> List[Dict]:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("configs", [])
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of config rows in {self.path}")
        return data
