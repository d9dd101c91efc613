#!/usr/bin/env python3
"""
SQL Dumper - CLI Entry Point
============================
Writes a logical backup of each configured MySQL database: a single SQL
file that drops and recreates the database, its tables and their rows.
"""

import argparse
import logging
import sys

import yaml

from .config import ConfigLoader
from .runner import DumpRunner
from .utils import print_dry_run_info, setup_logging


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='SQL Dumper - logical MySQL database backup tool'
    )
    parser.add_argument(
        '-c', '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Show what would be dumped without actually dumping'
    )
    parser.add_argument(
        '-d', '--database',
        help='Dump only the specified database (must be defined in config)'
    )
    parser.add_argument(
        '-i', '--instance',
        help='Dump only databases from the specified instance'
    )

    args = parser.parse_args()

    # Load configuration
    try:
        config = ConfigLoader(args.config)
    except FileNotFoundError:
        print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML in configuration file: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}")
        sys.exit(1)

    # Setup logging
    log_settings = config.get_logging_settings()
    if args.verbose:
        log_settings['level'] = 'DEBUG'
    setup_logging(log_settings)

    runner = DumpRunner(config)

    # Dry run mode
    if args.dry_run:
        logging.info("DRY RUN MODE - No data will be dumped")
        databases = runner.filter_databases(args.database, args.instance)
        print_dry_run_info(databases, config.get_defaults())
        sys.exit(0)

    # Run dump
    try:
        stats = runner.run(
            database_filter=args.database,
            instance_filter=args.instance
        )

        # Print summary
        logging.info("=" * 50)
        logging.info("DUMP COMPLETE")
        logging.info(f"Databases: {len(stats.databases)}")
        logging.info(f"Tables: {stats.total_tables}")
        logging.info(f"Total Rows: {stats.total_rows}")

        if stats.errors:
            logging.warning(f"Errors: {len(stats.errors)}")
            for err in stats.errors:
                logging.warning(f"  - {err['database']}: {err['error']}")
            sys.exit(1)

    except Exception as e:
        logging.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
