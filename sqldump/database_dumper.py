"""
Dump assembly for SQL Dumper.
"""

import fnmatch
import logging
import re
from datetime import datetime
from typing import Optional

from . import __version__
from .connection import DatabaseConnection
from .metadata import MetadataReader
from .models import DumpDocument, DumpSettings, TableDump
from .table_dumper import TableDumper, check_batch_size


class DatabaseDumper:
    """Builds a DumpDocument for one database over an open connection."""

    def __init__(self, connection: DatabaseConnection, settings: Optional[DumpSettings] = None):
        self.connection = connection
        self.settings = settings or DumpSettings()
        self.metadata = MetadataReader(connection)
        self.table_dumper = TableDumper(connection, escape_strings=self.settings.escape_strings)

    def _compile_exclusion_patterns(self, exclude_patterns: list[str]) -> list[re.Pattern]:
        """
        Pre-compile exclusion patterns to regex for faster matching.

        Converts fnmatch patterns to compiled regex patterns.
        """
        return [re.compile(fnmatch.translate(pattern)) for pattern in exclude_patterns]

    def _is_table_excluded(
        self,
        table_name: str,
        exclude_patterns: list[str],
        compiled_patterns: Optional[list[re.Pattern]] = None
    ) -> bool:
        """
        Check if a table should be excluded based on patterns.

        Supports:
        - Exact matches: 'users_backup'
        - Wildcard patterns: '*_old', 'tmp_*', '*_backup_*'
        """
        if compiled_patterns is None:
            compiled_patterns = self._compile_exclusion_patterns(exclude_patterns)

        for pattern, compiled in zip(exclude_patterns, compiled_patterns):
            if compiled.match(table_name):
                logging.debug(f"Table '{table_name}' excluded by pattern '{pattern}'")
                return True
        return False

    def build_dump(self, database: str) -> DumpDocument:
        """
        Read schema and data of a database into a dump document.

        The first failing query aborts the dump and its exception is
        propagated unchanged; no partially built document is returned.

        Args:
            database: Name of the database to dump.

        Returns:
            DumpDocument with every table, stamped with the completion time.
        """
        check_batch_size(self.settings.batch_size)

        server_version = self.metadata.server_version()
        database_sql = self.metadata.database_definition(database)
        table_names = self._get_tables_to_dump()
        logging.info(f"Dumping {len(table_names)} table(s) from '{database}'")

        tables = [self._dump_table(name) for name in table_names]

        return DumpDocument(
            dump_version=__version__,
            server_version=server_version,
            database=database,
            database_sql=database_sql,
            tables=tables,
            completed_at=datetime.now(),
        )

    def _get_tables_to_dump(self) -> list[str]:
        """Get tables in server order, applying exclusion patterns."""
        table_names = self.metadata.table_names()
        exclude_patterns = self.settings.exclude_tables
        if not exclude_patterns:
            return table_names

        compiled_patterns = self._compile_exclusion_patterns(exclude_patterns)
        original_count = len(table_names)
        table_names = [
            t for t in table_names
            if not self._is_table_excluded(t, exclude_patterns, compiled_patterns)
        ]
        excluded_count = original_count - len(table_names)
        if excluded_count > 0:
            logging.info(f"Excluded {excluded_count} table(s) matching exclusion patterns")
        return table_names

    def _dump_table(self, name: str) -> TableDump:
        """Read the definition and rows of a single table."""
        create_sql = self.metadata.table_definition(name)
        batches = self.table_dumper.extract_batches(name, self.settings.batch_size)
        row_count = self.table_dumper.rows_read

        logging.info(f"  ✓ {name}: {row_count} rows")
        return TableDump(name=name, create_sql=create_sql, batches=batches, row_count=row_count)
