"""UTF-8 length helpers.

Python strings index by code point, so the tokenizer slices with character
offsets directly. These helpers keep the parallel UTF-8 byte count without
encoding anything.

Example:
    >>> from charsift.utils.text import utf8_len
    >>> utf8_len("naïve")
    6
"""

from __future__ import annotations


def char_utf8_len(char: str) -> int:
    """Return the number of bytes ``char`` occupies in UTF-8.

    Lone surrogates are counted as 3 bytes, the width ``surrogatepass``
    would encode them with.

    Examples:
        >>> char_utf8_len("a")
        1
        >>> char_utf8_len("é")
        2
        >>> char_utf8_len("“")
        3
        >>> char_utf8_len("\U0001f600")
        4
    """
    cp = ord(char)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def utf8_len(text: str) -> int:
    """Return the number of bytes ``text`` occupies in UTF-8."""
    if text.isascii():
        return len(text)
    return sum(char_utf8_len(char) for char in text)
