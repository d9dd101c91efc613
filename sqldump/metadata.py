"""
Schema introspection for SQL Dumper.
"""

import logging

from mysql.connector import Error as MySQLError

from .connection import DatabaseConnection
from .errors import NotFoundError, QueryError
from .renderer import quote_identifier


class MetadataReader:
    """Reads server, database and table definitions through a connection."""

    def __init__(self, connection: DatabaseConnection):
        self.connection = connection

    def server_version(self) -> str:
        """Get the server version string."""
        query = "SELECT version()"
        row = self._query_row(query)
        return self._text(row[0])

    def database_definition(self, name: str) -> str:
        """Get the CREATE DATABASE statement for a database."""
        return self._show_create('database', name)

    def table_names(self) -> list[str]:
        """Get all tables in the current database, in server order."""
        query = "SHOW TABLES"
        logging.debug(f"Running query: {query}")
        try:
            results = self.connection.execute_query(query)
        except MySQLError as e:
            raise QueryError(query, e) from e
        return [self._text(row[0]) for row in results]

    def table_definition(self, name: str) -> str:
        """Get the CREATE TABLE statement for a table."""
        return self._show_create('table', name)

    def _show_create(self, kind: str, name: str) -> str:
        """Run SHOW CREATE <kind> and check the server answered for `name`."""
        query = f"SHOW CREATE {kind.upper()} {quote_identifier(name)}"
        row = self._query_row(query)
        if len(row) < 2:
            raise QueryError(query, ValueError(f"expected 2 columns, got {len(row)}"))

        returned = self._text(row[0])
        if returned != name:
            raise NotFoundError(kind, name, returned)
        return self._text(row[1])

    def _query_row(self, query: str) -> tuple:
        logging.debug(f"Running query: {query}")
        try:
            row = self.connection.query_row(query)
        except MySQLError as e:
            raise QueryError(query, e) from e
        if row is None:
            raise QueryError(query, ValueError("no rows returned"))
        return row

    @staticmethod
    def _text(value) -> str:
        if value is None:
            return ""
        if isinstance(value, (bytes, bytearray)):
            return value.decode('utf-8')
        return str(value)
