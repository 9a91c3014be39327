"""
Concurrency Test Suite

This module checks the exactly-once table construction under concurrent
first access, and that concurrent lookups agree with single-threaded ones.
"""

import concurrent.futures
import logging
import threading
import time

from pinyin_lookup import PinyinResolver
from pinyin_lookup.services import ResourceTable, TableLoaderService

NUM_THREADS = 16


class CountingLoader(TableLoaderService):
    """Loader that records how often the file is read and holds the read open briefly."""

    def __init__(self, config, delay: float = 0.05):
        super().__init__(config)
        self.calls = 0
        self._delay = delay
        self._calls_lock = threading.Lock()

    def load(self):
        with self._calls_lock:
            self.calls += 1
        time.sleep(self._delay)
        return super().load()


def _race(func, num_threads=NUM_THREADS):
    """Run ``func`` on many threads released at the same moment."""
    barrier = threading.Barrier(num_threads)

    def task(i):
        barrier.wait()
        return func(i)

    with concurrent.futures.ThreadPoolExecutor(max_workers=num_threads) as executor:
        return list(executor.map(task, range(num_threads)))


def test_concurrent_first_access_reads_dataset_once(table_config):
    loader = CountingLoader(table_config)
    resolver = PinyinResolver(table_config, table=ResourceTable(loader))

    results = _race(lambda i: resolver.resolve("中"))

    assert loader.calls == 1
    assert results == [["zhōng1", "zhòng4"]] * NUM_THREADS


def test_concurrent_first_access_sees_complete_table(table_config):
    loader = CountingLoader(table_config)
    resolver = PinyinResolver(table_config, table=ResourceTable(loader))
    chars = "中乐好汉一字语行a"

    expected = [PinyinResolver(table_config).resolve(ch) for ch in chars]
    results = _race(lambda i: [resolver.resolve(ch) for ch in chars])

    assert loader.calls == 1
    assert all(result == expected for result in results)


def test_concurrent_first_access_with_missing_dataset_logs_once(tmp_path, table_config, caplog):
    config = table_config.with_table_path(tmp_path / "missing.txt")
    loader = CountingLoader(config)
    resolver = PinyinResolver(config, table=ResourceTable(loader))

    with caplog.at_level(logging.ERROR, logger="pinyin_lookup"):
        results = _race(lambda i: resolver.resolve("中"))

    assert results == [None] * NUM_THREADS
    assert loader.calls == 1
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1


def test_lookups_after_construction_are_consistent(resolver):
    resolver.resolve("中")
    chars = ["中", "乐", "好", "汉", "一", "a"] * 50

    expected = [resolver.resolve(ch) for ch in chars]
    results = _race(lambda i: [resolver.resolve(ch) for ch in chars], num_threads=8)

    assert all(result == expected for result in results)
