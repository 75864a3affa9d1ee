"""Tests for charsift.profiling — tokenize profiling API."""

from charsift import FilteredTokenizer, WhitespaceFilter, terms
from charsift.profiling import (
    TokenizeAccumulator,
    get_tokenize_accumulator,
    profiled_tokenize,
)


class TestGetTokenizeAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_tokenize_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_tokenize():
            pass
        assert get_tokenize_accumulator() is None


class TestProfiledTokenize:
    def test_yields_accumulator(self) -> None:
        with profiled_tokenize() as acc:
            assert isinstance(acc, TokenizeAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_tokenize() as acc:
            assert get_tokenize_accumulator() is acc

    def test_records_exhausted_scan(self) -> None:
        with profiled_tokenize() as acc:
            list(FilteredTokenizer(WhitespaceFilter(), "héllo wörld"))
        assert acc.scans == 1
        assert acc.tokens == 2
        assert acc.chars == 11
        assert acc.bytes == 13

    def test_records_multiple_scans(self) -> None:
        with profiled_tokenize() as acc:
            terms("one")
            terms("two three")
            terms("")
        assert acc.scans == 3
        assert acc.tokens == 3

    def test_records_once_per_tokenizer(self) -> None:
        with profiled_tokenize() as acc:
            tokenizer = FilteredTokenizer(WhitespaceFilter(), "a b")
            list(tokenizer)
            next(tokenizer, None)
            next(tokenizer, None)
        assert acc.scans == 1

    def test_abandoned_tokenizer_not_recorded(self) -> None:
        with profiled_tokenize() as acc:
            tokenizer = FilteredTokenizer(WhitespaceFilter(), "a b c")
            next(tokenizer)
        assert acc.scans == 0

    def test_tokenizer_created_outside_not_recorded(self) -> None:
        tokenizer = FilteredTokenizer(WhitespaceFilter(), "a b")
        with profiled_tokenize() as acc:
            list(tokenizer)
        assert acc.scans == 0

    def test_total_duration_positive(self) -> None:
        with profiled_tokenize() as acc:
            terms("hello world")
        assert acc.total_duration_ms > 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = TokenizeAccumulator().summary()
        assert summary["scans"] == 0
        assert summary["tokens"] == 0
        assert summary["chars"] == 0
        assert summary["bytes"] == 0

    def test_summary_keys(self) -> None:
        with profiled_tokenize() as acc:
            terms("hello, world")
        assert set(acc.summary()) == {"total_ms", "scans", "tokens", "chars", "bytes"}
        assert acc.summary()["tokens"] == 3
