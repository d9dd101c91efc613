"""
Exceptions raised while building a dump.
"""

from typing import Optional


class DumpError(Exception):
    """Base exception for dump failures."""

    pass


class QueryError(DumpError):
    """Raised when a query or a row scan fails."""

    def __init__(self, query: str, cause: Exception):
        self.query = query
        self.cause = cause
        super().__init__(f"Query failed: {query}: {cause}")


class NotFoundError(DumpError):
    """Raised when introspection returns a different object than requested."""

    def __init__(self, kind: str, requested: str, returned: Optional[str]):
        self.kind = kind
        self.requested = requested
        self.returned = returned
        super().__init__(
            f"Returned {kind} '{returned}' is not the same as requested {kind} '{requested}'"
        )


class NoColumnsError(DumpError):
    """Raised when a table scan reports no columns."""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"No columns in table '{table}'")
