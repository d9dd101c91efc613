"""
Rendering of a DumpDocument into MySQL dump text.
"""

from datetime import datetime
from typing import Optional

from .models import DumpDocument, TableDump

SESSION_PREAMBLE = (
    "/*!40101 SET @OLD_CHARACTER_SET_CLIENT=@@CHARACTER_SET_CLIENT */;\n"
    "/*!40101 SET @OLD_CHARACTER_SET_RESULTS=@@CHARACTER_SET_RESULTS */;\n"
    "/*!40101 SET @OLD_COLLATION_CONNECTION=@@COLLATION_CONNECTION */;\n"
    "/*!40101 SET NAMES utf8 */;\n"
    "/*!40103 SET @OLD_TIME_ZONE=@@TIME_ZONE */;\n"
    "/*!40103 SET TIME_ZONE='+00:00' */;\n"
    "/*!40014 SET @OLD_UNIQUE_CHECKS=@@UNIQUE_CHECKS, UNIQUE_CHECKS=0 */;\n"
    "/*!40014 SET @OLD_FOREIGN_KEY_CHECKS=@@FOREIGN_KEY_CHECKS, FOREIGN_KEY_CHECKS=0 */;\n"
    "/*!40101 SET @OLD_SQL_MODE=@@SQL_MODE, SQL_MODE='NO_AUTO_VALUE_ON_ZERO' */;\n"
    "/*!40111 SET @OLD_SQL_NOTES=@@SQL_NOTES, SQL_NOTES=0 */;\n"
)

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def quote_identifier(name: str) -> str:
    """Quote a database or table name for use as a MySQL identifier."""
    return f"`{name.replace('`', '``')}`"


def format_timestamp(moment: Optional[datetime]) -> str:
    """Format the completion time shown in the dump trailer."""
    if moment is None:
        return ""
    return moment.strftime(TIMESTAMP_FORMAT)


def render(document: DumpDocument) -> str:
    """
    Render a dump document as SQL text.

    The output recreates the database from scratch: it drops and creates
    the database, then drops, creates and fills every table in the order
    they appear in the document.

    Args:
        document: Fully assembled dump document.

    Returns:
        The complete dump text.
    """
    database = quote_identifier(document.database)

    parts = [
        f"-- Python SQL Dump {document.dump_version}\n",
        "--\n",
        "-- ------------------------------------------------------\n",
        f"-- Server version\t{document.server_version}\n",
        "\n",
        SESSION_PREAMBLE,
        "\n\n",
        f"DROP DATABASE IF EXISTS {database};\n\n",
        f"{document.database_sql};\n\n",
        f"USE {database};\n\n",
    ]

    for table in document.tables:
        parts.append(render_table(table))

    parts.append(f"\n-- Dump completed on {format_timestamp(document.completed_at)}")
    return ''.join(parts)


def render_table(table: TableDump) -> str:
    """Render the structure and data section of a single table."""
    name = quote_identifier(table.name)
    inserts = ''.join(
        f"INSERT INTO {name} VALUES {batch};\n"
        for batch in table.batches
        if batch
    )

    return (
        "\n"
        "--\n"
        f"-- Table structure for table {name}\n"
        "--\n"
        "\n"
        f"DROP TABLE IF EXISTS {name};\n"
        "/*!40101 SET @saved_cs_client     = @@character_set_client */;\n"
        "/*!40101 SET character_set_client = utf8 */;\n"
        f"{table.create_sql};\n"
        "/*!40101 SET character_set_client = @saved_cs_client */;\n"
        "--\n"
        f"-- Dumping data for table {name}\n"
        "--\n"
        "\n"
        f"LOCK TABLES {name} WRITE;\n"
        f"/*!40000 ALTER TABLE {name} DISABLE KEYS */;\n"
        "\n"
        f"{inserts}"
        "\n"
        "\n"
        f"/*!40000 ALTER TABLE {name} ENABLE KEYS */;\n"
        "UNLOCK TABLES;\n"
    )
