"""Filter-driven tokenizer with lazy, forward-only scanning.

Walks the source one character at a time, asks a filter how to treat each
character, and yields one Token per call to next(). Work is done only when a
token is requested, and only as far as the next token boundary.

Offsets:
Token.start_offset counts characters (code points). Python strings slice by
code point, so the character cursor is also the slice index. A parallel UTF-8
byte cursor is kept for consumers that address the encoded buffer.

Thread Safety:
Tokenizer instances are single-use and single-consumer. Create one per
source string. All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from charsift.config import get_tokenize_config
from charsift.errors import FilterContractError, FilterTypeError
from charsift.filters import Filter, get_filter
from charsift.profiling import get_tokenize_accumulator
from charsift.tokens import Token
from charsift.utils.logger import get_logger
from charsift.utils.text import char_utf8_len, utf8_len

logger = get_logger(__name__)

_CONTENT = (False, False)

FilterLike = Filter | Callable[[str], tuple[bool, bool]]


class FilteredTokenizer:
    """Iterator of Tokens over a source string, split by a filter.

    Each step:
    1. Scan forward from the cursor, classifying each character
    2. A separator right at the cursor is consumed; if kept, it is returned
       as a one-character token, otherwise scanning continues
    3. A separator after some content returns the content; a dropped
       separator is consumed with it, a kept one is left for the next step
    4. At end of input, return whatever remains, then stop

    Usage:
            >>> from charsift.filters import WhitespaceFilter
            >>> for token in FilteredTokenizer(WhitespaceFilter(), "hello  world"):
            ...     print(repr(token))
        Token('hello', 0#0)
        Token('world', 7#1)

    Thread Safety:
        Tokenizer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_filter",
        "_classify",
        "_source",
        "_source_len",  # Cached len(source)
        "_char_offset",
        "_byte_offset",
        "_position",
        "_pending_keep",  # Kept separator already classified at the cursor
        "_strict",
        "_warned",
        "_finished",
        "_accumulator",
    )

    def __init__(self, filter: FilterLike, source: str) -> None:
        """Initialize tokenizer with a filter and source text.

        Args:
            filter: Object with a classify(char) method, or a callable taking
                a character and returning (is_separator, is_keep)
            source: Text to tokenize; borrowed, never modified

        Raises:
            FilterTypeError: If ``filter`` is neither a filter nor callable
        """
        classify = getattr(filter, "classify", None)
        if classify is None:
            if not callable(filter):
                raise FilterTypeError(filter)
            classify = filter

        self._filter = filter
        self._classify: Callable[[str], tuple[bool, bool]] = classify
        self._source = source
        self._source_len = len(source)
        self._char_offset = 0
        self._byte_offset = 0
        self._position = 0
        self._pending_keep = False
        self._strict = get_tokenize_config().strict_filters
        self._warned = False
        self._finished = False
        self._accumulator = get_tokenize_accumulator()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        """Produce the next token.

        Raises:
            StopIteration: Once the source is consumed, and on every call after
            FilterContractError: In strict mode, on a (False, True) verdict
        """
        source = self._source
        source_len = self._source_len
        classify = self._classify

        if self._pending_keep:
            # The previous step stopped in front of a kept separator
            self._pending_keep = False
            return self._emit_separator(source[self._char_offset])

        pos = self._char_offset
        while pos < source_len:
            char = source[pos]
            is_separator, is_keep = classify(char)
            if is_keep and not is_separator:
                is_separator, is_keep = self._malformed(char, (is_separator, is_keep))
            if not is_separator:
                pos += 1
                continue

            if pos == self._char_offset:
                # Nothing accumulated before this separator
                if is_keep:
                    return self._emit_separator(char)
                self._char_offset += 1
                self._byte_offset += char_utf8_len(char)
                pos += 1
                continue

            start = self._char_offset
            term = source[start:pos]
            self._char_offset = pos
            self._byte_offset += utf8_len(term)
            if is_keep:
                self._pending_keep = True
            else:
                self._char_offset += 1
                self._byte_offset += char_utf8_len(char)
            return self._emit(term, start)

        start = self._char_offset
        if start < source_len:
            term = source[start:]
            self._char_offset = source_len
            self._byte_offset += utf8_len(term)
            return self._emit(term, start)

        self._finish()
        raise StopIteration

    # =========================================================================
    # Cursor state
    # =========================================================================

    @property
    def char_offset(self) -> int:
        """Characters consumed so far."""
        return self._char_offset

    @property
    def byte_offset(self) -> int:
        """UTF-8 bytes consumed so far."""
        return self._byte_offset

    @property
    def exhausted(self) -> bool:
        """True once every character of the source has been consumed."""
        return self._char_offset >= self._source_len

    def __repr__(self) -> str:
        return (
            f"FilteredTokenizer({self._filter!r}, "
            f"offset={self._char_offset}/{self._source_len}, position={self._position})"
        )

    # =========================================================================
    # Token creation
    # =========================================================================

    def _emit(self, term: str, start_offset: int) -> Token:
        token = Token(term, start_offset, self._position)
        self._position += 1
        return token

    def _emit_separator(self, char: str) -> Token:
        """Consume the kept separator at the cursor and return it as a token."""
        start = self._char_offset
        self._char_offset += 1
        self._byte_offset += char_utf8_len(char)
        return self._emit(char, start)

    def _malformed(self, char: str, verdict: tuple[bool, bool]) -> tuple[bool, bool]:
        """Handle a (False, True) verdict: raise in strict mode, else treat as content."""
        if self._strict:
            raise FilterContractError(char, verdict)
        if not self._warned:
            self._warned = True
            logger.debug(
                "Filter %r marked %r as kept but not a separator; treating it as content",
                self._filter,
                char,
            )
        return _CONTENT

    def _finish(self) -> None:
        if self._finished:
            return
        self._finished = True
        logger.debug(
            "Tokenizer exhausted: %d tokens, %d chars, %d bytes",
            self._position,
            self._char_offset,
            self._byte_offset,
        )
        if self._accumulator is not None:
            self._accumulator.record_scan(self._position, self._char_offset, self._byte_offset)


def _resolve_filter(filter: FilterLike | str | None) -> FilterLike:
    if filter is None:
        return get_filter(get_tokenize_config().default_filter)
    if isinstance(filter, str):
        return get_filter(filter)
    return filter


def tokenize(source: str, filter: FilterLike | str | None = None) -> FilteredTokenizer:
    """Tokenize source with a filter, a registered filter name, or the default.

    Args:
        source: Text to tokenize
        filter: Filter instance, callable, registered name, or None for the
            configured default filter

    Returns:
        A fresh FilteredTokenizer over ``source``

    Example:
        >>> [t.term for t in tokenize("hello world", "whitespace")]
        ['hello', 'world']
    """
    return FilteredTokenizer(_resolve_filter(filter), source)


def terms(source: str, filter: FilterLike | str | None = None) -> list[str]:
    """Tokenize source and return just the token texts.

    Example:
        >>> terms("hello!world, this is some_text")
        ['hello', '!', 'world', ',', 'this', 'is', 'some', '_', 'text']
    """
    return [token.term for token in tokenize(source, filter)]
