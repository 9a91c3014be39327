#!/usr/bin/env python3
"""
Multi-threaded performance testing script for pinyin_lookup.

Measures lookup throughput with different thread counts against ONE shared
resolver, and checks that every thread sees the same results as a
single-threaded run.
"""

import concurrent.futures
import gc
import statistics
import sys
import time
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from pinyin_lookup import PinyinResolver

# CJK Unified Ideographs, repeated to get a measurable workload
TEST_CHARS = [chr(cp) for cp in range(0x4E00, 0x9FFF + 1)] * 2


def test_single_thread(chars: list[str], resolver: PinyinResolver) -> tuple[float, list[tuple[str, tuple[str, ...] | None]]]:
    """Resolve all characters on the calling thread."""
    start_time = time.perf_counter()
    results = []
    for ch in chars:
        readings = resolver.resolve(ch)
        results.append((ch, tuple(readings) if readings is not None else None))
    return time.perf_counter() - start_time, results


def test_multithreaded(chars: list[str], num_threads: int) -> tuple[float, list[tuple[str, tuple[str, ...] | None]]]:
    """Resolve with several threads sharing a freshly built resolver, so the first calls race on loading."""
    resolver = PinyinResolver()

    chunk_size = len(chars) // num_threads
    chunks = []
    for i in range(num_threads):
        end_idx = len(chars) if i == num_threads - 1 else (i + 1) * chunk_size
        chunks.append(chars[i * chunk_size : end_idx])

    start_time = time.perf_counter()
    with concurrent.futures.ThreadPoolExecutor(max_workers=num_threads) as executor:
        futures = [executor.submit(test_single_thread, chunk, resolver) for chunk in chunks]
        chunk_results = [future.result() for future in futures]
    elapsed = time.perf_counter() - start_time

    all_results = []
    for _, results in chunk_results:
        all_results.extend(results)
    return elapsed, all_results


def run_multiple_measurements(test_func, *args, num_runs=3):
    """Run multiple measurements and return (mean, std, results of the first run)."""
    times = []
    results = None

    for _ in range(num_runs):
        gc.collect()
        time_taken, test_results = test_func(*args)
        times.append(time_taken)
        if results is None:
            results = test_results

    std_time = statistics.stdev(times) if len(times) > 1 else 0
    return statistics.mean(times), std_time, results


def main():
    print("=" * 60)
    print("PINYIN_LOOKUP MULTI-THREADED PERFORMANCE TEST")
    print("=" * 60)

    resolver = PinyinResolver()
    resolver.resolve("中")  # load the table outside the measurements
    info = resolver.get_table_info()
    print(f"Table: {info.source} ({info.entry_count} records)")

    single_mean, single_std, single_results = run_multiple_measurements(test_single_thread, TEST_CHARS, resolver)
    print(f"Single-threaded: {single_mean:.3f}s ±{single_std:.3f} | {len(TEST_CHARS) / single_mean:.0f} chars/sec")
    print()
    print("Threads | Mean Time(s) | Std(s) | Rate(chars/s) | Safety")
    print("-" * 60)

    for num_threads in (2, 4, 8):
        mean_time, std_time, thread_results = run_multiple_measurements(test_multithreaded, TEST_CHARS, num_threads)
        safety_status = "✓ PASS" if thread_results == single_results else "✗ FAIL"
        print(f"{num_threads:^7} | {mean_time:^12.3f} | {std_time:^6.3f} | {len(TEST_CHARS) / mean_time:^13.0f} | {safety_status}")

    print()
    print("Note: the GIL limits CPU-bound threading speedup in Python.")


if __name__ == "__main__":
    main()
