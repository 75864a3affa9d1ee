"""Tests for the Token dataclass."""

import dataclasses

import pytest

from charsift import Token


class TestToken:
    def test_fields(self) -> None:
        token = Token("hello", 6, 1)
        assert token.term == "hello"
        assert token.start_offset == 6
        assert token.position == 1

    def test_from_str(self) -> None:
        assert Token.from_str("world", 6, 1) == Token(term="world", start_offset=6, position=1)

    def test_end_offset_counts_characters(self) -> None:
        assert Token("héllo", 3, 0).end_offset == 8
        assert Token("😀", 0, 0).end_offset == 1

    def test_str_is_term(self) -> None:
        assert str(Token("hello", 0, 0)) == "hello"
        assert f"{Token('!', 5, 1)}" == "!"

    def test_repr(self) -> None:
        assert repr(Token("hello", 6, 1)) == "Token('hello', 6#1)"

    def test_repr_truncates_long_terms(self) -> None:
        token = Token("a" * 40, 0, 0)
        assert repr(token) == f"Token({'a' * 17 + '...'!r}, 0#0)"

    def test_immutable(self) -> None:
        token = Token("hello", 0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.term = "other"  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        assert Token("a", 0, 0) == Token("a", 0, 0)
        assert Token("a", 0, 0) != Token("a", 0, 1)
        assert len({Token("a", 0, 0), Token("a", 0, 0)}) == 1
