"""
Types package for full-name parsing.

This package contains result types, configuration classes, and diagnostics used
throughout the parsing pipeline.
"""

from nameparts.types.config import FixCase, ParserConfig, PartToReturn
from nameparts.types.diagnostics import Diagnostic, DiagnosticKind, NameParseError
from nameparts.types.results import NAME_FIELDS, ParsedName, ParseResult, Token

__all__ = [
    "NAME_FIELDS",
    "Diagnostic",
    "DiagnosticKind",
    "FixCase",
    "NameParseError",
    "ParseResult",
    "ParsedName",
    "ParserConfig",
    "PartToReturn",
    "Token",
]
