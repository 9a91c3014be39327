"""
Configuration for pinyin table loading and record parsing.

This module contains the immutable configuration shared by the table loader
and the record parser.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from pinyin_lookup.paths import DEFAULT_TABLE_PATH


@dataclass(frozen=True)
class PinyinTableConfig:
    """Immutable configuration for the codepoint -> pinyin record table."""

    # Dataset location and decoding
    table_path: str
    encoding: str

    # Record format
    none_record: str
    left_bracket: str
    right_bracket: str
    separator: str

    @classmethod
    def create_default(cls) -> PinyinTableConfig:
        """Factory method for the bundled dataset."""
        return cls(
            table_path=str(DEFAULT_TABLE_PATH),
            # utf-8-sig also accepts files written with a BOM
            encoding="utf-8-sig",
            none_record="(none0)",
            left_bracket="(",
            right_bracket=")",
            separator=",",
        )

    def with_table_path(self, table_path: str | Path) -> PinyinTableConfig:
        """Immutable update method for the dataset location."""
        return replace(self, table_path=str(table_path))
