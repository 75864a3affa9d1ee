"""Token definition for the charsift tokenizer.

The tokenizer produces a stream of Token objects, one per call to next().
Each Token carries its text, the character offset where it starts in the
source, and its ordinal position within the stream.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        term: The text of the token. A slice of the source string.
        start_offset: Absolute offset of the token in the source, counted in
            characters (code points), not bytes.
        position: Zero-based ordinal of the token in its stream. Separator
            tokens count toward the ordinal too.

    Examples:
            >>> tok = Token("hello", 0, 0)
            >>> str(tok)
            'hello'
            >>> tok.end_offset
            5

    """

    term: str
    start_offset: int
    position: int

    @classmethod
    def from_str(cls, term: str, start_offset: int, position: int) -> Token:
        """Create a token from its term and coordinates."""
        return cls(term=term, start_offset=start_offset, position=position)

    @property
    def end_offset(self) -> int:
        """Character offset one past the last character of the token."""
        return self.start_offset + len(self.term)

    def __str__(self) -> str:
        return self.term

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        term = self.term
        if len(term) > 20:
            term = term[:17] + "..."
        return f"Token({term!r}, {self.start_offset}#{self.position})"
