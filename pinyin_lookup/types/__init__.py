"""
Types package for pinyin lookup.

This package contains the configuration, the immutable table view and the
result types used throughout the lookup system.
"""

from pinyin_lookup.types.config import PinyinTableConfig
from pinyin_lookup.types.results import TableInfo, TableLoadResult
from pinyin_lookup.types.table import PinyinTable

__all__ = [
    "PinyinTable",
    "PinyinTableConfig",
    "TableInfo",
    "TableLoadResult",
]
