"""
nameparts: Full Name Parsing Library

Splits free-form personal names into title, first, middle, last, nickname and
suffix, with optional synonym normalization and case repair.
"""

import logging

__version__ = "0.1.0"

__all__ = ["FullNameParser", "NameParseError", "ParsedName", "ParserConfig", "parse_full_name"]

logger = logging.getLogger("nameparts")


def __getattr__(name):
    """Lazy import so `python -m nameparts` and the data module stay cheap to load."""
    if name in ("FullNameParser", "parse_full_name"):
        from nameparts import parser

        return getattr(parser, name)
    if name in ("NameParseError", "ParsedName", "ParserConfig"):
        from nameparts import types

        return getattr(types, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
