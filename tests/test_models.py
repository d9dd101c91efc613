"""
Unit tests for models.py
"""

from datetime import datetime

from sqldump.models import (
    DatabaseStats,
    DumpDocument,
    DumpSettings,
    DumpStats,
    TableDump,
)


class TestTableDump:
    """Tests for TableDump dataclass."""

    def test_default_values(self):
        table = TableDump(name="users", create_sql="CREATE TABLE `users` (`id` int)")
        assert table.batches == []
        assert table.row_count == 0

    def test_batches_not_shared(self):
        first = TableDump(name="a", create_sql="")
        second = TableDump(name="b", create_sql="")
        first.batches.append("('1')")
        assert second.batches == []


class TestDumpDocument:
    """Tests for DumpDocument dataclass."""

    def test_default_values(self):
        document = DumpDocument(
            dump_version="1.0.0",
            server_version="8.0.36",
            database="shop",
            database_sql="CREATE DATABASE `shop`"
        )
        assert document.tables == []
        assert document.completed_at is None
        assert document.total_rows == 0

    def test_total_rows(self):
        document = DumpDocument(
            dump_version="1.0.0",
            server_version="8.0.36",
            database="shop",
            database_sql="CREATE DATABASE `shop`",
            tables=[
                TableDump("users", "", ["('1'),('2')"], row_count=2),
                TableDump("orders", "", [""], row_count=0),
                TableDump("items", "", ["('1')"], row_count=1),
            ],
            completed_at=datetime(2024, 1, 15, 10, 30, 45)
        )
        assert document.total_rows == 3


class TestStats:
    """Tests for DatabaseStats and DumpStats dataclasses."""

    def test_database_stats_defaults(self):
        stats = DatabaseStats(name="shop", instance="primary")
        assert stats.tables == 0
        assert stats.total_rows == 0
        assert stats.file_path == ""
        assert stats.success is False
        assert stats.error is None

    def test_dump_stats_defaults(self):
        stats = DumpStats()
        assert stats.databases == []
        assert stats.total_tables == 0
        assert stats.total_rows == 0
        assert stats.errors == []


class TestDumpSettings:
    """Tests for DumpSettings dataclass."""

    def test_default_values(self):
        settings = DumpSettings()
        assert settings.batch_size == 1000
        assert settings.escape_strings is False
        assert settings.single_transaction is False
        assert settings.exclude_tables == []

    def test_from_configs_defaults_only(self):
        defaults = {"batch_size": 500, "escape_strings": True}
        settings = DumpSettings.from_configs(defaults, {"name": "shop"})
        assert settings.batch_size == 500
        assert settings.escape_strings is True

    def test_from_configs_database_overrides_defaults(self):
        defaults = {"batch_size": 500, "single_transaction": True}
        db_config = {"name": "shop", "batch_size": 200, "exclude_tables": ["tmp_*"]}
        settings = DumpSettings.from_configs(defaults, db_config)
        assert settings.batch_size == 200  # database wins
        assert settings.single_transaction is True  # from defaults
        assert settings.exclude_tables == ["tmp_*"]

    def test_from_configs_ignores_unknown_keys(self):
        settings = DumpSettings.from_configs({"row_limit": 10}, {"name": "shop", "instance": "primary"})
        assert settings == DumpSettings()
