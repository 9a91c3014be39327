"""
Table loading service for pinyin lookup.

This module reads the flat ``<HEX> <record>`` dataset once and publishes it as
an immutable table shared by every caller.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable
from pathlib import Path

from pinyin_lookup.paths import logger
from pinyin_lookup.types import PinyinTable, PinyinTableConfig, TableInfo, TableLoadResult


class TableLoaderService:
    """Service to read and parse the codepoint -> record dataset."""

    def __init__(self, config: PinyinTableConfig):
        self._config = config

    @property
    def source(self) -> str:
        return self._config.table_path

    @staticmethod
    def parse_entry(line: str) -> tuple[str, str] | None:
        """
        Split one dataset line on its first space.

        Returns None when the line does not yield a non-empty key and a
        non-empty record.
        """
        parts = line.strip().split(" ", 1)
        if len(parts) != 2:
            return None
        key, record = parts[0], parts[1].strip()
        if not key or not record:
            return None
        return key, record

    def parse_lines(self, lines: Iterable[str]) -> tuple[dict[str, str], int]:
        """Build the mapping from dataset lines; returns (entries, skipped line count)."""
        entries: dict[str, str] = {}
        skipped = 0

        for line in lines:
            if not line.strip():
                continue
            entry = self.parse_entry(line)
            if entry is None:
                skipped += 1
                logger.debug("Skipping malformed pinyin table line: %r", line)
                continue
            key, record = entry
            # Duplicate keys: the last occurrence wins
            entries[key] = record

        return entries, skipped

    def load(self) -> TableLoadResult:
        """Read the configured file. Any failure to open, decode or read it becomes a failed result."""
        path = Path(self._config.table_path)
        try:
            with path.open(encoding=self._config.encoding) as f:
                entries, skipped = self.parse_lines(f)
        except FileNotFoundError:
            return TableLoadResult.failure(f"pinyin table not found: {path}", source=str(path))
        # ValueError covers decode errors and invalid paths, LookupError an unknown encoding
        except (OSError, ValueError, LookupError) as e:
            return TableLoadResult.failure(f"failed to read pinyin table {path}: {e}", source=str(path))

        return TableLoadResult.success_with_table(PinyinTable.from_dict(entries, source=str(path)), skipped)


class ResourceTable:
    """
    Lazily built, process-wide pinyin table.

    * built exactly once, on first access, by exactly one thread
    * immutable afterwards, lookups take no lock
    """

    def __init__(self, loader: TableLoaderService):
        self._loader = loader
        self._lock = threading.Lock()
        self._result: TableLoadResult | None = None

    @classmethod
    def from_config(cls, config: PinyinTableConfig) -> ResourceTable:
        return cls(TableLoaderService(config))

    # ---------- public API ----------
    def lookup(self, key: str) -> str | None:
        """Return the raw record for an uppercase hex key, or None when absent."""
        return self.table.lookup(key)

    @property
    def table(self) -> PinyinTable:
        return self.load_result.table

    @property
    def load_result(self) -> TableLoadResult:
        result = self._result
        if result is None:
            result = self._build()
        return result

    @property
    def is_built(self) -> bool:
        return self._result is not None

    def info(self) -> TableInfo:
        """Describe the table without forcing it to load."""
        result = self._result
        if result is None:
            return TableInfo(table_built=False, load_succeeded=False, entry_count=0, source=self._loader.source)
        return TableInfo(
            table_built=True,
            load_succeeded=result.success,
            entry_count=len(result.table),
            source=result.table.source or self._loader.source,
            skipped_lines=result.skipped_lines,
            error_message=result.error_message,
        )

    # ---------- internal ----------
    def _build(self) -> TableLoadResult:
        with self._lock:
            # Another thread may have finished while we waited
            if self._result is not None:
                return self._result

            result = self._loader.load()
            if not result.success:
                logger.error("%s. Every pinyin lookup will return no result.", result.error_message)
            else:
                if result.skipped_lines:
                    logger.warning(
                        "Skipped %d malformed line(s) while loading pinyin table %s",
                        result.skipped_lines,
                        result.table.source,
                    )
                logger.debug("Loaded %d pinyin records from %s", len(result.table), result.table.source)

            self._result = result
            return result
