"""Default filter: drop ASCII whitespace, keep punctuation.

The keep set covers ASCII punctuation (except $) and three typographic
characters: left and right double quotation marks and the double prime.
"""

from __future__ import annotations

from charsift.filters import register_filter

# Space, tab, newline, carriage return, form feed
DEFAULT_DROP_CHARS = frozenset(" \t\n\r\f")

DEFAULT_KEEP_CHARS = frozenset(
    {
        "#",
        "!",
        "\\",
        '"',
        "%",
        "&",
        "'",
        "(",
        ")",
        "*",
        "+",
        ",",
        "-",
        ".",
        "/",
        ":",
        ";",
        "<",
        "=",
        ">",
        "?",
        "@",
        "[",
        "]",
        "^",
        "_",
        "`",
        "{",
        "|",
        "}",
        "~",
        "\u201c",  # left double quotation mark
        "\u201d",  # right double quotation mark
        "\u2033",  # double prime
    }
)

_KEEP = (True, True)
_DROP = (True, False)
_CONTENT = (False, False)


@register_filter("default")
class DefaultFilter:
    """Separate on ASCII whitespace and emit punctuation as tokens.

    Example:
        >>> from charsift import terms
        >>> terms("hello!world, this is some_text", DefaultFilter())
        ['hello', '!', 'world', ',', 'this', 'is', 'some', '_', 'text']

    """

    __slots__ = ()

    def classify(self, char: str) -> tuple[bool, bool]:
        if char in DEFAULT_DROP_CHARS:
            return _DROP
        if char in DEFAULT_KEEP_CHARS:
            return _KEEP
        return _CONTENT

    def __repr__(self) -> str:
        return "DefaultFilter()"
