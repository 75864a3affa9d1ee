"""
charsift — Filter-driven tokenizer for Python

Splits text into tokens using a pluggable character filter. For each
character the filter says whether it separates tokens and whether the
separator is a token in its own right. Tokens carry their character offset
and their position in the stream.

Quick Start:
    >>> from charsift import terms
    >>> terms("hello!world, this is some_text")
    ['hello', '!', 'world', ',', 'this', 'is', 'some', '_', 'text']

    >>> from charsift import FilteredTokenizer, WhitespaceFilter
    >>> [repr(t) for t in FilteredTokenizer(WhitespaceFilter(), "a  b")]
    ["Token('a', 0#0)", "Token('b', 3#1)"]

Custom Filters:
    >>> class CommaFilter:
    ...     def classify(self, char):
    ...         if char == " ":
    ...             return (True, False)
    ...         return (char == ",", char == ",")
    >>> terms("hello!world, this", CommaFilter())
    ['hello!world', ',', 'this']
"""

from charsift.config import (
    TokenizeConfig,
    get_tokenize_config,
    reset_tokenize_config,
    set_tokenize_config,
    tokenize_config_context,
)
from charsift.errors import (
    CharsiftError,
    FilterContractError,
    FilterTypeError,
    UnknownFilterError,
)
from charsift.filters import (
    DEFAULT_DROP_CHARS,
    DEFAULT_KEEP_CHARS,
    DefaultFilter,
    Filter,
    HashFilter,
    VecFilter,
    WhitespaceFilter,
    available_filters,
    get_filter,
    register_filter,
)
from charsift.profiling import TokenizeAccumulator, get_tokenize_accumulator, profiled_tokenize
from charsift.tokenizer import FilteredTokenizer, terms, tokenize
from charsift.tokens import Token

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DROP_CHARS",
    "DEFAULT_KEEP_CHARS",
    "CharsiftError",
    "DefaultFilter",
    "Filter",
    "FilterContractError",
    "FilterTypeError",
    "FilteredTokenizer",
    "HashFilter",
    "Token",
    "TokenizeAccumulator",
    "TokenizeConfig",
    "UnknownFilterError",
    "VecFilter",
    "WhitespaceFilter",
    "__version__",
    "available_filters",
    "get_filter",
    "get_tokenize_accumulator",
    "get_tokenize_config",
    "profiled_tokenize",
    "register_filter",
    "reset_tokenize_config",
    "set_tokenize_config",
    "terms",
    "tokenize",
    "tokenize_config_context",
]
