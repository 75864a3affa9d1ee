"""ContextVar-based tokenizer configuration for charsift.

Provides context-local configuration using Python's ContextVars (PEP 567).
A tokenizer reads the active config once, when it is constructed.

Usage:
    from charsift.config import TokenizeConfig, tokenize_config_context

    with tokenize_config_context(TokenizeConfig(default_filter="whitespace")):
        words = terms("hello world")

    # Or set it explicitly
    set_tokenize_config(TokenizeConfig(strict_filters=True))
    try:
        tokens = list(FilteredTokenizer(my_filter, source))
    finally:
        reset_tokenize_config()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenizeConfig:
    """Immutable tokenizer configuration.

    Attributes:
        default_filter: Registered filter name used by tokenize() and terms()
            when no filter is passed
        strict_filters: Raise FilterContractError when a filter marks a
            character as kept without marking it as a separator, instead of
            treating the character as ordinary content

    """

    default_filter: str = "default"
    strict_filters: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TokenizeConfig":
        """Create TokenizeConfig from dictionary.

        Only includes keys that are valid TokenizeConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = TokenizeConfig.from_dict({
            ...     "default_filter": "whitespace",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.default_filter
            'whitespace'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizeConfig = TokenizeConfig()

_tokenize_config: ContextVar[TokenizeConfig] = ContextVar(
    "tokenize_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenize_config() -> TokenizeConfig:
    """Get the active tokenizer configuration for this context."""
    return _tokenize_config.get()


def set_tokenize_config(config: TokenizeConfig) -> None:
    """Set tokenizer configuration for the current context.

    Args:
        config: TokenizeConfig instance to use for this context.

    """
    _tokenize_config.set(config)


def reset_tokenize_config() -> None:
    """Reset to the default configuration."""
    _tokenize_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenize_config_context(config: TokenizeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with tokenize_config_context(TokenizeConfig(strict_filters=True)):
        ...     tokens = list(FilteredTokenizer(my_filter, "a b"))

    """
    previous = _tokenize_config.get()
    _tokenize_config.set(config)
    try:
        yield
    finally:
        _tokenize_config.set(previous)


__all__ = [
    "TokenizeConfig",
    "get_tokenize_config",
    "reset_tokenize_config",
    "set_tokenize_config",
    "tokenize_config_context",
]
