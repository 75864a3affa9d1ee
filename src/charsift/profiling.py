"""charsift TokenizeAccumulator — opt-in profiling for tokenization.

This module provides accumulated metrics across tokenizer runs:
- Total profiling time
- Tokens emitted
- Characters and UTF-8 bytes consumed

Zero overhead when disabled (get_tokenize_accumulator() returns None).

Example:
    from charsift import terms
    from charsift.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        terms("hello world")

    print(metrics.summary())
    # {"total_ms": 0.1, "scans": 1, "tokens": 2, "chars": 11, "bytes": 11}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TokenizeAccumulator:
    """Accumulated metrics during tokenization.

    A tokenizer records into the accumulator that was active when it was
    constructed, once, when it runs to exhaustion. Tokenizers that are
    abandoned part way are not recorded.

    Attributes:
        start_time: Profiling start timestamp.
        scans: Number of tokenizers run to exhaustion.
        tokens: Number of tokens emitted.
        chars: Number of characters consumed.
        bytes: Number of UTF-8 bytes consumed.

    """

    start_time: float = field(default_factory=perf_counter)
    scans: int = 0
    tokens: int = 0
    chars: int = 0
    bytes: int = 0

    def record_scan(self, tokens: int, chars: int, byte_count: int) -> None:
        """Record a completed scan."""
        self.scans += 1
        self.tokens += tokens
        self.chars += chars
        self.bytes += byte_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms, scans, tokens, chars, bytes.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scans": self.scans,
            "tokens": self.tokens,
            "chars": self.chars,
            "bytes": self.bytes,
        }


_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Context manager for profiled tokenization.

    Creates a TokenizeAccumulator and makes it available via
    get_tokenize_accumulator() for the duration of the with block.

    Yields:
        TokenizeAccumulator that will be populated by exhausted tokenizers.

    """
    acc = TokenizeAccumulator()
    token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
