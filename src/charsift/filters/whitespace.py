"""Whitespace filter."""

from __future__ import annotations

from charsift.filters import register_filter

# str.isspace() accepts the ASCII information separators (FS, GS, RS, US),
# which lack the Unicode White_Space property.
_NOT_WHITE_SPACE = frozenset("\x1c\x1d\x1e\x1f")


@register_filter("whitespace")
class WhitespaceFilter:
    """Separate on Unicode White_Space characters, never emit separators."""

    __slots__ = ()

    def classify(self, char: str) -> tuple[bool, bool]:
        return (char.isspace() and char not in _NOT_WHITE_SPACE, False)

    def __repr__(self) -> str:
        return "WhitespaceFilter()"
