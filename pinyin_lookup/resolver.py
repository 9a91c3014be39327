"""
Chinese Character to Hanyu Pinyin Resolution Module

This module resolves a single Chinese character to every Hanyu Pinyin reading
known for it, using a static ``codepoint -> record`` dataset.

## Overview

The core functionality is provided by the `PinyinResolver` class:

1. **Key Derivation**: The character's codepoint as uppercase hex ('中' -> '4E2D')
2. **Table Lookup**: A lazily built, immutable table shared by all callers
3. **Record Validation**: Sentinel `(none0)` and malformed records are dropped
4. **Record Parsing**: `(zhong1,zhong4)` -> `["zhong1", "zhong4"]`

## Architecture

- **TableLoaderService**: Reads and parses the dataset file
- **ResourceTable**: Exactly-once, thread-safe construction of the table
- **RecordParsingService**: Record validation and decoding
- **PinyinResolver**: Lookup façade with dependency injection

## Usage Examples

```python
from pinyin_lookup import PinyinResolver, PinyinTableConfig

resolver = PinyinResolver()
resolver.resolve("中")
# Returns: ["zhong1", "zhong4"]

resolver.resolve("a")
# Returns: None (no record for U+0061)

# Custom dataset, e.g. supplied by the host application
config = PinyinTableConfig.create_default().with_table_path("/srv/pinyindb/table.txt")
resolver = PinyinResolver(config)

# Process-wide shared instance
from pinyin_lookup import resolve
resolve("中")
```

## Error Handling

`resolve` never raises for unknown or malformed input. Unknown characters,
`(none0)` records, malformed records and non-character input all return None.
A missing or unreadable dataset is reported once through the `pinyin_lookup`
logger; the table is then empty and every lookup returns None.

## Thread Safety

The table is built by exactly one thread on first use; concurrent first callers
wait for it. After that the table is immutable and lookups take no lock.
"""
from __future__ import annotations

import threading

from pinyin_lookup.services import (
    PinyinTableConfig,
    RecordParsingService,
    ResourceTable,
    TableInfo,
)


class PinyinResolver:
    """Resolve Chinese characters to their Hanyu Pinyin readings."""

    def __init__(self, config: PinyinTableConfig | None = None, table: ResourceTable | None = None):
        self._config = config or PinyinTableConfig.create_default()
        # A host may build one table and share it between resolvers
        self._table = table or ResourceTable.from_config(self._config)
        self._records = RecordParsingService(self._config)

    @property
    def table(self) -> ResourceTable:
        return self._table

    # Public API methods
    def resolve(self, ch: str) -> list[str] | None:
        """
        Main API method: all known pinyin readings of one character.

        Returns the readings in dataset order, or None when the character is
        unknown, has no reading, or its record is malformed.
        """
        return self._records.parse_record(self.record_for(ch))

    def record_for(self, ch: str) -> str | None:
        """The validated raw record of a character, or None."""
        if not isinstance(ch, str) or len(ch) != 1:
            return None

        record = self._table.lookup(self._records.codepoint_key(ch))
        return record if self._records.is_valid_record(record) else None

    def get_table_info(self) -> TableInfo:
        """Get table information."""
        return self._table.info()


_DEFAULT_RESOLVER: PinyinResolver | None = None
_DEFAULT_RESOLVER_LOCK = threading.Lock()


def get_default_resolver() -> PinyinResolver:
    """Shared resolver over the bundled dataset, created on first call."""
    global _DEFAULT_RESOLVER
    resolver = _DEFAULT_RESOLVER
    if resolver is None:
        with _DEFAULT_RESOLVER_LOCK:
            if _DEFAULT_RESOLVER is None:
                _DEFAULT_RESOLVER = PinyinResolver()
            resolver = _DEFAULT_RESOLVER
    return resolver


def resolve(ch: str) -> list[str] | None:
    """Resolve ``ch`` with the shared resolver."""
    return get_default_resolver().resolve(ch)
