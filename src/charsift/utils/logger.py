"""Logger lookup for charsift modules.

Every charsift logger lives under the "charsift" namespace, so one
``logging.getLogger("charsift")`` call configures the whole library. The
tokenizer logs on ``charsift.tokenizer`` at DEBUG only: once when a scan is
exhausted, and once per tokenizer for a (False, True) filter verdict.
charsift adds no handlers; that is left to the application.

Example:
    >>> from charsift.utils.logger import get_logger
    >>> get_logger("charsift.tokenizer").name
    'charsift.tokenizer'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the charsift namespace.

    Names already under "charsift" are used as-is; anything else is nested
    beneath it.

    Example:
        >>> get_logger("filters").name
        'charsift.filters'
    """
    if not (name == "charsift" or name.startswith("charsift.")):
        name = f"charsift.{name}"
    return logging.getLogger(name)
