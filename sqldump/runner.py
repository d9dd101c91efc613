"""
Dumping of every configured database for SQL Dumper.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from .config import ConfigLoader
from .connection import DatabaseConnection
from .database_dumper import DatabaseDumper
from .models import DatabaseStats, DumpSettings, DumpStats
from .renderer import render
from .writer import build_output_path, write_dump


class DumpRunner:
    """Dumps each configured database to its own file."""

    def __init__(self, config: ConfigLoader):
        self.config = config
        self.output_settings = config.get_output_settings()
        self.defaults = config.get_defaults()
        self.stats = DumpStats()

    def run(
        self,
        database_filter: Optional[str] = None,
        instance_filter: Optional[str] = None
    ) -> DumpStats:
        """Run the dump process for all configured databases.

        Args:
            database_filter: If specified, only dump this database name
            instance_filter: If specified, only dump databases from this instance
        """
        output_dir = Path(self.output_settings.get('directory', './dumps'))
        output_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        databases = self.filter_databases(database_filter, instance_filter)

        logging.info(f"Starting dump of {len(databases)} database(s)")

        for db_config in databases:
            self._dump_database(db_config, output_dir, timestamp)

        return self.stats

    def filter_databases(
        self,
        database_filter: Optional[str],
        instance_filter: Optional[str]
    ) -> list[dict[str, Any]]:
        """Filter databases based on provided filters."""
        databases = self.config.get_databases()

        if database_filter:
            databases = [db for db in databases if db['name'] == database_filter]
            if not databases:
                logging.warning(f"No database named '{database_filter}' found in configuration")

        if instance_filter:
            databases = [db for db in databases if db.get('instance', 'primary') == instance_filter]
            if not databases:
                logging.warning(f"No databases found for instance '{instance_filter}'")

        return databases

    def _dump_database(
        self,
        db_config: dict[str, Any],
        output_dir: Path,
        timestamp: str
    ) -> None:
        """Dump a single database; a failure is recorded and writes no file."""
        db_name = db_config['name']
        instance_name = db_config.get('instance', 'primary')
        settings = DumpSettings.from_configs(self.defaults, db_config)
        compress = self.output_settings.get('compress', False)

        db_stats = DatabaseStats(name=db_name, instance=instance_name)

        try:
            instance_config = self.config.get_instance(instance_name)

            with DatabaseConnection(
                host=instance_config['host'],
                port=instance_config.get('port', DatabaseConnection.DEFAULT_PORT),
                user=instance_config['user'],
                password=instance_config['password'],
                database=db_name
            ) as conn:
                if settings.single_transaction:
                    conn.begin_snapshot()
                document = DatabaseDumper(conn, settings).build_dump(db_name)

            output_path = build_output_path(
                output_dir,
                db_name,
                timestamp if self.output_settings.get('timestamp_suffix', True) else None,
                compress=compress
            )
            write_dump(
                render(document),
                output_path,
                compress=compress
            )

            db_stats.tables = len(document.tables)
            db_stats.total_rows = document.total_rows
            db_stats.file_path = str(output_path)
            db_stats.success = True
            self.stats.total_tables += db_stats.tables
            self.stats.total_rows += db_stats.total_rows
            logging.info(f"  ✓ {db_name}: {db_stats.tables} tables, {db_stats.total_rows} rows -> {output_path}")

        except Exception as e:
            db_stats.error = str(e)
            logging.error(f"  ✗ {db_name}: {e}")
            self.stats.errors.append({
                'database': db_name,
                'error': str(e)
            })

        self.stats.databases.append(db_stats)
