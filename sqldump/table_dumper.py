"""
Table data extraction for SQL Dumper.
"""

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

from mysql.connector import Error as MySQLError

from .connection import DatabaseConnection
from .errors import NoColumnsError, QueryError
from .renderer import quote_identifier


def check_batch_size(batch_size: int) -> None:
    if not isinstance(batch_size, int) or isinstance(batch_size, bool) or batch_size < 1:
        raise ValueError(f"batch_size must be a positive integer, got {batch_size!r}")


def split_batches(tuples: list[str], batch_size: int) -> list[str]:
    """
    Join value tuples into comma-separated batches of at most batch_size.

    The remainder is always emitted as the last batch, so an empty input
    yields a single empty batch and the result is never empty.
    """
    check_batch_size(batch_size)
    return _join_batches(tuples, batch_size)


def _join_batches(tuples: list[str], batch_size: int) -> list[str]:
    batches = []
    start = 0
    while len(tuples) - start > batch_size:
        batches.append(','.join(tuples[start:start + batch_size]))
        start += batch_size
    batches.append(','.join(tuples[start:]))
    return batches


def _format_timedelta(value: timedelta) -> str:
    seconds = int(value.total_seconds())
    sign = '-' if seconds < 0 else ''
    hours, rest = divmod(abs(seconds), 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.microseconds:
        text += f".{abs(value).microseconds:06d}"
    return text


def _format_datetime(value: datetime) -> str:
    if value.microsecond:
        return value.strftime('%Y-%m-%d %H:%M:%S.%f')
    return value.strftime('%Y-%m-%d %H:%M:%S')


class TableDumper:
    """Extracts the rows of a table as batches of SQL value tuples."""

    DEFAULT_BATCH_SIZE = 1000
    NULL = 'null'

    def __init__(self, connection: DatabaseConnection, escape_strings: bool = False):
        self.connection = connection
        self.escape_strings = escape_strings
        self.rows_read = 0

        # Text form of driver values, keyed by exact type
        self._type_formatters: dict[type, callable] = {
            str: lambda v: v,
            bool: lambda v: '1' if v else '0',
            int: str,
            float: str,
            Decimal: str,
            bytes: lambda v: v.decode('utf-8', 'surrogateescape'),
            bytearray: lambda v: v.decode('utf-8', 'surrogateescape'),
            datetime: _format_datetime,
            date: lambda v: v.isoformat(),
            time: lambda v: v.isoformat(),
            timedelta: _format_timedelta,
            set: lambda v: ','.join(sorted(v)),
        }

    def extract_batches(self, table: str, batch_size: int = DEFAULT_BATCH_SIZE) -> list[str]:
        """
        Read every row of a table and group them into INSERT batches.

        The number of rows read is kept in rows_read.

        Args:
            table: Name of the table to read.
            batch_size: Maximum number of value tuples per batch.

        Returns:
            Batch strings, each ready to follow VALUES in an INSERT.
        """
        check_batch_size(batch_size)
        tuples = self.extract_tuples(table)
        self.rows_read = len(tuples)
        return _join_batches(tuples, batch_size)

    def extract_tuples(self, table: str) -> list[str]:
        """Read every row of a table as a parenthesized value tuple."""
        query = f"SELECT * FROM {quote_identifier(table)}"
        logging.debug(f"Dumping table '{table}' with query: {query}")

        cursor = self.connection.get_cursor()
        try:
            cursor.execute(query)
            if not cursor.description:
                raise NoColumnsError(table)
            return [self.format_row(row) for row in cursor]
        except MySQLError as e:
            raise QueryError(query, e) from e
        finally:
            cursor.close()

    def format_row(self, row: tuple) -> str:
        """Format a row as a value tuple, e.g. ('1','a',null)."""
        return f"({','.join(self.format_value(value) for value in row)})"

    def format_value(self, value: Any) -> str:
        """Format a single column value as a SQL literal.

        NULL becomes the bare word null; every other value is quoted
        regardless of its column type.
        """
        if value is None:
            return self.NULL

        text = self.to_text(value)
        if self.escape_strings:
            text = text.replace("\\", "\\\\").replace("'", "\\'")
            text = text.replace("\n", "\\n").replace("\r", "\\r")
        return f"'{text}'"

    def to_text(self, value: Any) -> str:
        """Convert a driver value to the text MySQL would send for it."""
        formatter = self._type_formatters.get(type(value))
        if formatter:
            return formatter(value)
        return str(value)
