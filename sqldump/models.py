"""
Data models for SQL Dumper.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class TableDump:
    """One table's schema and batched row values."""
    name: str
    create_sql: str
    batches: list[str] = field(default_factory=list)
    row_count: int = 0


@dataclass
class DumpDocument:
    """A complete database dump, ready to be rendered."""
    dump_version: str
    server_version: str
    database: str
    database_sql: str
    tables: list[TableDump] = field(default_factory=list)
    completed_at: Optional[datetime] = None

    @property
    def total_rows(self) -> int:
        return sum(table.row_count for table in self.tables)


@dataclass
class DatabaseStats:
    """Statistics for a single database dump."""
    name: str
    instance: str
    tables: int = 0
    total_rows: int = 0
    file_path: str = ""
    success: bool = False
    error: Optional[str] = None


@dataclass
class DumpStats:
    """Overall dump statistics."""
    databases: list[DatabaseStats] = field(default_factory=list)
    total_tables: int = 0
    total_rows: int = 0
    errors: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class DumpSettings:
    """Merged settings for dumping a database."""
    batch_size: int = 1000
    escape_strings: bool = False
    single_transaction: bool = False
    exclude_tables: list[str] = field(default_factory=list)

    @classmethod
    def from_configs(
        cls,
        defaults: dict[str, Any],
        db_config: dict[str, Any]
    ) -> "DumpSettings":
        """
        Create DumpSettings by merging configs with priority: database > defaults.
        """
        settings = {}
        for key in ['batch_size', 'escape_strings', 'single_transaction', 'exclude_tables']:
            if key in defaults:
                settings[key] = defaults[key]
            if key in db_config:
                settings[key] = db_config[key]
        return cls(**settings)
