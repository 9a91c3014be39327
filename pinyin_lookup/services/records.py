"""
Record parsing service for pinyin lookup.

This module validates raw dataset records such as ``(zhong1,zhong4)`` and
decodes them into ordered lists of pinyin readings.
"""
from __future__ import annotations

from pinyin_lookup.types import PinyinTableConfig


class RecordParsingService:
    """Service for turning characters into table keys and records into readings."""

    def __init__(self, config: PinyinTableConfig):
        self._config = config

    @staticmethod
    def codepoint_key(ch: str) -> str:
        """Uppercase hex codepoint without prefix or padding: '中' -> '4E2D'."""
        return format(ord(ch), "X")

    def is_valid_record(self, record: str | None) -> bool:
        """
        A record is usable when it is present, is not the "none" sentinel and is
        wrapped in brackets.
        """
        return (
            record is not None
            and record != self._config.none_record
            and record.startswith(self._config.left_bracket)
            and record.endswith(self._config.right_bracket)
        )

    def strip_record(self, record: str) -> str:
        """Return the text between the first left bracket and the last right bracket."""
        start = record.index(self._config.left_bracket) + 1
        end = record.rindex(self._config.right_bracket)
        return record[start:end]

    def parse_record(self, record: str | None) -> list[str] | None:
        """
        Decode a record into its readings, in dataset order.

        Returns None for missing, sentinel or malformed records. Empty readings
        (e.g. from a trailing comma) are kept as empty strings.
        """
        if not self.is_valid_record(record):
            return None
        return self.strip_record(record).split(self._config.separator)
