"""Keep/drop membership filters.

Both filters classify a character by membership in two sets:
- keep chars end the current token and are emitted as tokens themselves
- drop chars end the current token and are discarded

A character in neither set is ordinary content. A character in both is kept.

HashFilter stores the sets as frozensets. VecFilter stores them as dense
boolean arrays indexed by code point, so a lookup is a bounds check plus an
index. The arrays grow to the largest registered code point, which keeps
them small for ASCII punctuation and large for anything above it.
"""

from __future__ import annotations

from collections.abc import Iterable


class HashFilter:
    """Classify characters by hashed keep and drop sets.

    Example:
        >>> f = HashFilter(keep_chars="!", drop_chars=" ")
        >>> f.classify("!"), f.classify(" "), f.classify("a")
        ((True, True), (True, False), (False, False))

    """

    __slots__ = ("keep_chars", "drop_chars")

    def __init__(
        self,
        keep_chars: Iterable[str] = (),
        drop_chars: Iterable[str] = (),
    ) -> None:
        self.keep_chars: frozenset[str] = frozenset(keep_chars)
        self.drop_chars: frozenset[str] = frozenset(drop_chars)

    def classify(self, char: str) -> tuple[bool, bool]:
        is_keep = char in self.keep_chars
        return (is_keep or char in self.drop_chars, is_keep)

    def __repr__(self) -> str:
        return (
            f"HashFilter(keep_chars={''.join(sorted(self.keep_chars))!r}, "
            f"drop_chars={''.join(sorted(self.drop_chars))!r})"
        )


class VecFilter:
    """Classify characters by dense boolean arrays indexed by code point.

    Characters are registered one at a time with add_keep() and add_drop();
    each array is resized to cover the new code point if needed.

    Example:
        >>> f = VecFilter()
        >>> f.add_drop(" ")
        >>> f.add_keep("!")
        >>> f.classify("!"), f.classify(" "), f.classify("a")
        ((True, True), (True, False), (False, False))

    """

    __slots__ = ("keep_chars", "drop_chars")

    def __init__(
        self,
        keep_chars: Iterable[str] = (),
        drop_chars: Iterable[str] = (),
    ) -> None:
        self.keep_chars: list[bool] = []
        self.drop_chars: list[bool] = []
        for char in keep_chars:
            self.add_keep(char)
        for char in drop_chars:
            self.add_drop(char)

    @staticmethod
    def _mark(table: list[bool], char: str) -> None:
        index = ord(char)
        if index >= len(table):
            table.extend([False] * (index + 1 - len(table)))
        table[index] = True

    def add_keep(self, char: str) -> None:
        """Register ``char`` as a kept separator."""
        self._mark(self.keep_chars, char)

    def add_drop(self, char: str) -> None:
        """Register ``char`` as a discarded separator."""
        self._mark(self.drop_chars, char)

    def classify(self, char: str) -> tuple[bool, bool]:
        index = ord(char)
        keep = self.keep_chars
        is_keep = index < len(keep) and keep[index]
        if is_keep:
            return (True, True)
        drop = self.drop_chars
        return (index < len(drop) and drop[index], False)

    def __repr__(self) -> str:
        return f"VecFilter(keep_size={len(self.keep_chars)}, drop_size={len(self.drop_chars)})"
