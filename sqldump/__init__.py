"""
SQL Dumper
==========
Logical backups of MySQL databases:
- Schema discovery through SHOW CREATE DATABASE / SHOW CREATE TABLE
- Full-table extraction into batched INSERT statements
- Deterministic rendering of a mysqldump-style SQL file
- YAML configuration for multiple instances and databases
"""

__version__ = "1.0.0"

from .config import ConfigLoader
from .connection import DatabaseConnection
from .database_dumper import DatabaseDumper
from .errors import DumpError, NoColumnsError, NotFoundError, QueryError
from .main import main
from .metadata import MetadataReader
from .models import (
    DatabaseStats,
    DumpDocument,
    DumpSettings,
    DumpStats,
    TableDump,
)
from .renderer import quote_identifier, render
from .runner import DumpRunner
from .table_dumper import TableDumper, split_batches
from .utils import format_settings_display, print_dry_run_info, setup_logging
from .writer import build_output_path, write_dump

__all__ = [
    # Main entry point
    "main",
    # Core classes
    "ConfigLoader",
    "DatabaseConnection",
    "DatabaseDumper",
    "DumpRunner",
    "MetadataReader",
    "TableDumper",
    # Rendering and output
    "build_output_path",
    "quote_identifier",
    "render",
    "split_batches",
    "write_dump",
    # Errors
    "DumpError",
    "NoColumnsError",
    "NotFoundError",
    "QueryError",
    # Models
    "DatabaseStats",
    "DumpDocument",
    "DumpSettings",
    "DumpStats",
    "TableDump",
    # Utilities
    "format_settings_display",
    "print_dry_run_info",
    "setup_logging",
]
