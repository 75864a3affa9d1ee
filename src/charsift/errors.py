"""Exception classes for charsift.

The scanning engine itself never fails: it is total over any string and any
conforming filter. These exceptions cover misuse at the edges (an object that
is not a filter, an unknown filter name) and the opt-in strict mode for
filters that break their contract.
"""

from __future__ import annotations


class CharsiftError(Exception):
    """Base exception for all charsift errors.

    Subclass this for specific error categories.
    """

    pass


class FilterContractError(CharsiftError):
    """A filter returned a verdict outside its contract.

    Only raised when ``TokenizeConfig.strict_filters`` is enabled. By default
    the tokenizer treats the offending character as ordinary content.
    """

    def __init__(self, char: str, verdict: tuple[bool, bool]) -> None:
        """Initialize contract error.

        Args:
            char: The character that was being classified
            verdict: The (is_separator, is_keep) pair the filter returned
        """
        self.char = char
        self.verdict = verdict
        super().__init__(
            f"Filter returned {verdict!r} for {char!r}: "
            "a character cannot be kept without being a separator"
        )


class FilterTypeError(CharsiftError, TypeError):
    """Object given as a filter has no classify() method and is not callable."""

    def __init__(self, obj: object) -> None:
        self.obj = obj
        super().__init__(
            f"Expected a filter with classify(char) or a callable, got {type(obj).__name__}"
        )


class UnknownFilterError(CharsiftError, KeyError):
    """No filter is registered under the requested name."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        """Initialize unknown filter error.

        Args:
            name: The requested filter name
            available: Names that are registered
        """
        self.name = name
        self.available = available
        hint = f" (available: {', '.join(available)})" if available else ""
        super().__init__(f"Unknown filter '{name}'{hint}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])
