"""Benchmark the built-in filters against each other.

Every benchmark drains a tokenizer over the same text, so the numbers
compare classification cost plus the shared scanning loop. The default,
hash-set and dense-array filters classify identically.

Run with:
    pytest benchmarks/benchmark_filters.py -v --benchmark-only

Or for quick comparison:
    python benchmarks/benchmark_filters.py
"""

from __future__ import annotations

import time
from collections.abc import Callable

import pytest

from charsift import (
    DEFAULT_DROP_CHARS,
    DEFAULT_KEEP_CHARS,
    DefaultFilter,
    FilteredTokenizer,
    HashFilter,
    VecFilter,
    WhitespaceFilter,
)


def drain(filter, source: str) -> int:
    """Tokenize source to exhaustion, returning the token count."""
    count = 0
    for _ in FilteredTokenizer(filter, source):
        count += 1
    return count


@pytest.mark.benchmark(group="filters-prose")
def test_benchmark_default(benchmark, prose):
    benchmark(drain, DefaultFilter(), prose)


@pytest.mark.benchmark(group="filters-prose")
def test_benchmark_hash_set(benchmark, prose, hash_filter):
    benchmark(drain, hash_filter, prose)


@pytest.mark.benchmark(group="filters-prose")
def test_benchmark_vec(benchmark, prose, vec_filter):
    benchmark(drain, vec_filter, prose)


@pytest.mark.benchmark(group="filters-prose")
def test_benchmark_vec_with_construction(benchmark, prose):
    """Dense-array filter built from scratch each round."""

    def build_and_drain() -> int:
        return drain(VecFilter(DEFAULT_KEEP_CHARS, DEFAULT_DROP_CHARS), prose)

    benchmark(build_and_drain)


@pytest.mark.benchmark(group="filters-prose")
def test_benchmark_whitespace(benchmark, prose):
    benchmark(drain, WhitespaceFilter(), prose)


@pytest.mark.benchmark(group="filters-large")
def test_benchmark_default_large(benchmark, large_document):
    benchmark(drain, DefaultFilter(), large_document)


@pytest.mark.benchmark(group="filters-large")
def test_benchmark_whitespace_large(benchmark, large_document):
    benchmark(drain, WhitespaceFilter(), large_document)


@pytest.mark.benchmark(group="filters-large")
def test_benchmark_str_split_large(benchmark, large_document):
    """Baseline: str.split() does the whitespace split in C."""
    benchmark(str.split, large_document)


def time_it(run: Callable[[], object], iterations: int = 200) -> float:
    """Average seconds per call after a short warmup."""
    for _ in range(10):
        run()
    start = time.perf_counter()
    for _ in range(iterations):
        run()
    return (time.perf_counter() - start) / iterations


def main() -> None:
    """Run benchmarks and print results."""
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parent))
    from conftest import PROSE

    print(f"Python {sys.version.split()[0]}")
    print(f"Corpus: {len(PROSE)} chars, {len(PROSE.encode('utf-8'))} bytes\n")

    candidates = [
        ("default", DefaultFilter()),
        ("hash set", HashFilter(DEFAULT_KEEP_CHARS, DEFAULT_DROP_CHARS)),
        ("dense array", VecFilter(DEFAULT_KEEP_CHARS, DEFAULT_DROP_CHARS)),
        ("whitespace", WhitespaceFilter()),
    ]

    results = [(name, time_it(lambda f=f: drain(f, PROSE))) for name, f in candidates]
    results.sort(key=lambda x: x[1])
    baseline = results[0][1]

    print("=" * 60)
    print("RESULTS: Tokenize prose corpus")
    print("=" * 60)
    for name, seconds in results:
        ratio = seconds / baseline if baseline > 0 else 0
        print(f"{name:20} {seconds * 1_000_000:8.1f}us  ({ratio:.2f}x)")


if __name__ == "__main__":
    main()
