"""
Services package for pinyin lookup.

This package contains the service classes used by the resolver, organized by
responsibility. The pypinyin-backed dataset builder lives in
``pinyin_lookup.services.table_builder`` and is imported on demand.
"""

from pinyin_lookup.services.records import RecordParsingService
from pinyin_lookup.services.table import ResourceTable, TableLoaderService
from pinyin_lookup.types import PinyinTable, PinyinTableConfig, TableInfo, TableLoadResult

__all__ = [
    # Services
    "RecordParsingService",
    "ResourceTable",
    "TableLoaderService",
    # Types (re-exported for convenience)
    "PinyinTable",
    "PinyinTableConfig",
    "TableInfo",
    "TableLoadResult",
]
