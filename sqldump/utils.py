"""
Utility functions for SQL Dumper.
"""

import logging
import sys
from pathlib import Path
from typing import Any

from .models import DumpSettings


def setup_logging(log_settings: dict[str, Any]) -> None:
    """Setup logging configuration."""
    log_level = getattr(logging, log_settings.get('level', 'INFO').upper())
    log_file = log_settings.get('file')

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def print_dry_run_info(databases: list[dict[str, Any]], defaults: dict[str, Any]) -> None:
    """Log what would be dumped in dry-run mode."""
    for db in databases:
        logging.info(f"Would dump database: {db['name']} from instance: {db.get('instance', 'primary')}")

        settings = DumpSettings.from_configs(defaults, db)
        logging.info(f"  Settings: {', '.join(format_settings_display(settings))}")


def format_settings_display(settings: DumpSettings) -> list[str]:
    """Format settings for display in dry-run mode."""
    parts = [f"batch_size={settings.batch_size}"]
    if settings.escape_strings:
        parts.append("escape_strings")
    if settings.single_transaction:
        parts.append("single_transaction")
    if settings.exclude_tables:
        parts.append(f"exclude={','.join(settings.exclude_tables)}")
    return parts
