"""
Result types for pinyin table loading.

This module contains result classes that provide Either-like error handling
and immutable data structures.
"""
from __future__ import annotations

from dataclasses import dataclass

from pinyin_lookup.types.table import PinyinTable


@dataclass(frozen=True)
class TableLoadResult:
    """Result of the one-time table construction - Either-like structure."""

    success: bool
    table: PinyinTable
    error_message: str | None = None
    # Lines that did not split into a key and a record
    skipped_lines: int = 0

    @classmethod
    def success_with_table(cls, table: PinyinTable, skipped_lines: int = 0) -> TableLoadResult:
        return cls(success=True, table=table, error_message=None, skipped_lines=skipped_lines)

    @classmethod
    def failure(cls, error_message: str, source: str | None = None) -> TableLoadResult:
        return cls(success=False, table=PinyinTable.empty(source), error_message=error_message, skipped_lines=0)


@dataclass(frozen=True)
class TableInfo:
    """Immutable table information structure."""

    table_built: bool
    load_succeeded: bool
    entry_count: int
    source: str | None = None
    skipped_lines: int = 0
    error_message: str | None = None
