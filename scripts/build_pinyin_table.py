#!/usr/bin/env python3
"""
Build a codepoint -> pinyin record table from the pypinyin dictionary.

Writes one ``<HEX> <record>`` line per codepoint, the format read by
``pinyin_lookup.services.table.TableLoaderService``.
"""

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from pinyin_lookup.paths import DEFAULT_TABLE_PATH
from pinyin_lookup.services.table_builder import DEFAULT_END, DEFAULT_START, write_table


def _hex(value: str) -> int:
    return int(value.removeprefix("U+").removeprefix("0x"), 16)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a Hanyu Pinyin codepoint table.")
    parser.add_argument("--output", type=Path, default=DEFAULT_TABLE_PATH, help="Table file to write.")
    parser.add_argument("--start", type=_hex, default=DEFAULT_START, help="First codepoint (hex).")
    parser.add_argument("--end", type=_hex, default=DEFAULT_END, help="Last codepoint (hex, inclusive).")
    parser.add_argument(
        "--skip-unknown",
        action="store_true",
        help="Omit codepoints without readings instead of writing (none0) records.",
    )
    return parser


def main() -> int:
    args = _build_arg_parser().parse_args()
    try:
        written = write_table(args.output, args.start, args.end, skip_unknown=args.skip_unknown)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Wrote {written} records to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
