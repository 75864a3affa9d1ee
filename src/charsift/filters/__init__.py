"""Character filters for the charsift tokenizer.

A filter decides, one character at a time, whether the character ends the
token being accumulated and whether it becomes a token of its own:

    (False, False)  part of a token
    (True,  False)  separator, discarded
    (True,  True)   separator, emitted as a one-character token

(False, True) is outside the contract. The tokenizer treats it as
(False, False), or raises FilterContractError in strict mode.

Built-in filters:
- whitespace: separates on str.isspace(), keeps nothing
- default: drops ASCII whitespace, keeps ASCII punctuation and typographic quotes
- HashFilter / VecFilter: caller-supplied keep and drop sets

Usage:
    >>> from charsift import FilteredTokenizer
    >>> from charsift.filters import HashFilter
    >>> f = HashFilter(keep_chars="!", drop_chars=" ")
    >>> [t.term for t in FilteredTokenizer(f, "hi! there")]
    ['hi', '!', 'there']

Custom filters only need a classify() method; a bare callable works too:

    >>> def comma_filter(char):
    ...     return (char == ",", char == ",")
    >>> [t.term for t in FilteredTokenizer(comma_filter, "a,b")]
    ['a', ',', 'b']

Thread Safety:
Built-in filters are immutable after construction, except VecFilter whose
add_keep()/add_drop() must not race with tokenizers using it.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from charsift.errors import UnknownFilterError

__all__ = [
    "BUILTIN_FILTERS",
    "Filter",
    "available_filters",
    "get_filter",
    "register_filter",
]


@runtime_checkable
class Filter(Protocol):
    """Protocol for character filters."""

    def classify(self, char: str) -> tuple[bool, bool]:
        """Return (is_separator, is_keep) for a single character.

        Must be a pure function of ``char`` for a given filter instance.
        Called once per character, in source order.
        """
        ...


# Registry of named filters
BUILTIN_FILTERS: dict[str, Callable[[], Filter]] = {}


def register_filter(
    name: str,
) -> Callable[[Callable[[], Filter]], Callable[[], Filter]]:
    """Decorator to register a filter factory under a name.

    The factory (usually the filter class itself) is called with no
    arguments each time the name is looked up.

    Usage:
        @register_filter("whitespace")
        class WhitespaceFilter:
            ...

    """

    def decorator(factory: Callable[[], Filter]) -> Callable[[], Filter]:
        BUILTIN_FILTERS[name] = factory
        return factory

    return decorator


def available_filters() -> tuple[str, ...]:
    """Registered filter names, sorted."""
    return tuple(sorted(BUILTIN_FILTERS))


def get_filter(name: str) -> Filter:
    """Get a fresh filter instance by name.

    Raises:
        UnknownFilterError: If no filter is registered under ``name``

    """
    factory = BUILTIN_FILTERS.get(name)
    if factory is None:
        raise UnknownFilterError(name, available_filters())
    return factory()


# Import built-in filters to register them
from charsift.filters.default import (  # noqa: E402
    DEFAULT_DROP_CHARS,
    DEFAULT_KEEP_CHARS,
    DefaultFilter,
)
from charsift.filters.membership import HashFilter, VecFilter  # noqa: E402
from charsift.filters.whitespace import WhitespaceFilter  # noqa: E402

__all__ += [
    "DEFAULT_DROP_CHARS",
    "DEFAULT_KEEP_CHARS",
    "DefaultFilter",
    "HashFilter",
    "VecFilter",
    "WhitespaceFilter",
]
