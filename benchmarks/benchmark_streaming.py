"""Benchmark streaming re-parse patterns.

Compares re-parsing the whole text on every chunk against memoizing
per-block parses with split_into_blocks and a DictParseCache.

Run with:
    pytest benchmarks/benchmark_streaming.py -v --benchmark-only
"""

import pytest

from streammark import DictParseCache, format_inline, heal, parse, split_into_blocks


@pytest.mark.benchmark(group="parse-full")
def test_benchmark_parse_large_document(benchmark, large_document):
    """Benchmark a single non-streaming parse of a large document."""
    benchmark(parse, large_document, False)


@pytest.mark.benchmark(group="parse-streaming")
def test_benchmark_reparse_every_prefix(benchmark, stream_prefixes):
    """Benchmark parsing every prefix from scratch (naive host)."""

    def reparse_all():
        for text in stream_prefixes:
            parse(text)

    benchmark(reparse_all)


@pytest.mark.benchmark(group="parse-streaming")
def test_benchmark_reparse_with_block_cache(benchmark, stream_prefixes):
    """Benchmark per-block memoization; only the growing block misses."""

    def reparse_cached():
        cache = DictParseCache()
        for text in stream_prefixes:
            for block in split_into_blocks(text):
                parse(block, cache=cache)

    benchmark(reparse_cached)


@pytest.mark.benchmark(group="components")
def test_benchmark_heal(benchmark, stream_prefixes):
    """Benchmark heal() alone across a stream."""

    def heal_all():
        for text in stream_prefixes:
            heal(text)

    benchmark(heal_all)


@pytest.mark.benchmark(group="components")
def test_benchmark_format_inline(benchmark):
    """Benchmark inline formatting of a span-dense line."""
    line = "A **bold** claim, an *aside*, `code`, ~~old~~, [a link](https://x.y). " * 20
    benchmark(format_inline, line)
