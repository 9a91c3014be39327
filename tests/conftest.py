"""
Shared fixtures for the pinyin_lookup test suite.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import pinyin_lookup
sys.path.insert(0, str(Path(__file__).parent.parent))

from pinyin_lookup import PinyinResolver, PinyinTableConfig

SAMPLE_TABLE_LINES = [
    "4E00 (none0)",
    "4E2D (zhōng1,zhòng4)",
    "4E50 (le4,yue4,yao4)",
    "597D (hao3,hao4)",
    "6C49 (han4)",
    "20000 (he1)",
    "5B57 zi4",
    "8BED (yu3,yu4",
    "884C (xing2,)",
]


def write_table(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def table_file(tmp_path):
    """A small dataset with valid, sentinel and malformed records."""
    return write_table(tmp_path / "unicode_to_hanyu_pinyin.txt", SAMPLE_TABLE_LINES)


@pytest.fixture
def table_config(table_file):
    return PinyinTableConfig.create_default().with_table_path(table_file)


@pytest.fixture
def resolver(table_config):
    """Resolver over the sample dataset."""
    return PinyinResolver(table_config)


@pytest.fixture(scope="session")
def bundled_resolver():
    """Resolver over the dataset shipped with the package."""
    return PinyinResolver()
