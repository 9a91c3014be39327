import logging
import os
from pathlib import Path

logger = logging.getLogger("pinyin_lookup")

try:
    PACKAGE_ROOT_PATH = os.path.abspath(os.path.join(__file__, os.pardir))
except NameError:
    PACKAGE_ROOT_PATH = os.path.abspath(os.path.join(os.getcwd(), "pinyin_lookup"))

DATA_PATH = Path(PACKAGE_ROOT_PATH) / "data"
DEFAULT_TABLE_PATH = DATA_PATH / "pinyindb" / "unicode_to_hanyu_pinyin.txt"
