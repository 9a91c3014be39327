"""
Dataset generation for pinyin lookup.

Builds ``<HEX> <record>`` lines compatible with the table loader from the
pypinyin character dictionary. Readings use tone numbers with the neutral tone
written as 5, e.g. ``4E2D (zhong1,zhong4)``.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import pypinyin
from pypinyin.pinyin_dict import pinyin_dict

from pinyin_lookup.types import PinyinTableConfig

# CJK Unified Ideographs
DEFAULT_START = 0x4E00
DEFAULT_END = 0x9FFF


def format_record(readings: Iterable[str], config: PinyinTableConfig | None = None) -> str:
    """Join readings into a record; no readings gives the "none" sentinel."""
    config = config or PinyinTableConfig.create_default()
    readings = list(readings)
    if not readings:
        return config.none_record
    return f"{config.left_bracket}{config.separator.join(readings)}{config.right_bracket}"


def build_record(ch: str, config: PinyinTableConfig | None = None) -> str:
    """Record for one character, all heteronyms in pypinyin's order."""
    if ord(ch) not in pinyin_dict:
        return format_record([], config)

    readings = pypinyin.pinyin(
        ch,
        style=pypinyin.Style.TONE3,
        heteronym=True,
        neutral_tone_with_five=True,
    )[0]
    # dict.fromkeys keeps first-seen order
    return format_record(dict.fromkeys(readings), config)


def iter_table_lines(codepoints: Iterable[int], config: PinyinTableConfig | None = None) -> Iterator[str]:
    for cp in codepoints:
        yield f"{cp:X} {build_record(chr(cp), config)}"


def write_table(
    path: str | Path,
    start: int = DEFAULT_START,
    end: int = DEFAULT_END,
    *,
    skip_unknown: bool = False,
    config: PinyinTableConfig | None = None,
) -> int:
    """
    Write records for codepoints ``start..end`` (inclusive) to ``path``.

    Returns the number of lines written.
    """
    if start < 0 or end < start or end > 0x10FFFF:
        raise ValueError(f"invalid codepoint range: {start:X}..{end:X}")

    config = config or PinyinTableConfig.create_default()
    codepoints = range(start, end + 1)
    if skip_unknown:
        codepoints = [cp for cp in codepoints if cp in pinyin_dict]

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with path.open("w", encoding="utf-8", newline="\n") as f:
        for line in iter_table_lines(codepoints, config):
            f.write(line + "\n")
            written += 1
    return written
