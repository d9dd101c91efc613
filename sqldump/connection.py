"""
Database connection management for SQL Dumper.
"""

import logging
from typing import Optional

import mysql.connector
from mysql.connector import Error as MySQLError


class DatabaseConnection:
    """Manages MySQL database connections with context manager support.

    This is the query executor handed to the metadata reader, the table
    dumper and the database dumper; none of them open connections themselves.
    """

    DEFAULT_PORT = 3306
    DEFAULT_CHARSET = 'utf8mb4'

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        database: Optional[str] = None
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.connection = None

    def __enter__(self) -> "DatabaseConnection":
        """Context manager entry - establish connection."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close connection."""
        self.disconnect()

    def connect(self) -> None:
        """Establish database connection."""
        try:
            self.connection = mysql.connector.connect(
                host=self.host,
                port=self.port,
                user=self.user,
                password=self.password,
                database=self.database,
                charset=self.DEFAULT_CHARSET,
                use_unicode=True
            )
            logging.info(f"Connected to {self.host}:{self.port}/{self.database or 'N/A'}")
        except MySQLError as e:
            logging.error(f"Failed to connect to database: {e}")
            raise

    def disconnect(self) -> None:
        """Close database connection."""
        if self.connection and self.connection.is_connected():
            self.connection.close()
            logging.debug("Database connection closed")

    def begin_snapshot(self) -> None:
        """Start a read-only transaction with a consistent snapshot.

        Every query issued afterwards on this connection sees the same
        point-in-time view of the data until the connection is closed.
        """
        self.connection.start_transaction(consistent_snapshot=True, readonly=True)
        logging.debug("Started consistent snapshot transaction")

    def execute_query(self, query: str, params: Optional[tuple] = None) -> list[tuple]:
        """Execute a query and return results."""
        cursor = self.connection.cursor()
        try:
            cursor.execute(query, params)
            return cursor.fetchall()
        finally:
            cursor.close()

    def query_row(self, query: str) -> Optional[tuple]:
        """Execute a query and return its first row, or None if it is empty."""
        cursor = self.connection.cursor(buffered=True)
        try:
            cursor.execute(query)
            return cursor.fetchone()
        finally:
            cursor.close()

    def get_cursor(self, buffered: bool = False):
        """Get a cursor for streaming large results.

        Args:
            buffered: If False (default), uses server-side cursor for memory-efficient
                     streaming of large result sets. If True, uses buffered cursor.
        """
        return self.connection.cursor(buffered=buffered)
