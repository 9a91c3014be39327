"""
Immutable in-memory view of the pinyin dataset.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, eq=False)
class PinyinTable:
    """Read-only mapping of uppercase hex codepoint -> raw pinyin record."""

    entries: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    source: str | None = None

    @classmethod
    def from_dict(cls, entries: dict[str, str], source: str | None = None) -> PinyinTable:
        # Copy so later changes to the caller's dict never leak into the table
        return cls(entries=MappingProxyType(dict(entries)), source=source)

    @classmethod
    def empty(cls, source: str | None = None) -> PinyinTable:
        return cls(entries=MappingProxyType({}), source=source)

    def lookup(self, key: str) -> str | None:
        """Return the raw record stored under ``key``, or None when absent."""
        return self.entries.get(key)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries
