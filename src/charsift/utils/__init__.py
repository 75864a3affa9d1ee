"""Utility modules for charsift.

Provides:
- text: char_utf8_len, utf8_len for byte offset bookkeeping
- logger: get_logger for logging
"""

from charsift.utils.logger import get_logger
from charsift.utils.text import char_utf8_len, utf8_len

__all__ = [
    "char_utf8_len",
    "get_logger",
    "utf8_len",
]
