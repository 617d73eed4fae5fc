"""
Services package for full-name parsing.

This package contains all service classes used by the parsing pipeline,
organized by stage.
"""

from nameparts.services.diagnostics import DiagnosticReporter
from nameparts.services.extraction import AffixExtractionService
from nameparts.services.formatting import NameFormattingService
from nameparts.services.initialization import DataInitializationService, NameLists
from nameparts.services.joining import TokenJoiningService
from nameparts.services.normalization import NormalizationService
from nameparts.services.parsing import NameParsingService
from nameparts.types import ParsedName, ParserConfig, ParseResult

__all__ = [
    "AffixExtractionService",
    "DataInitializationService",
    "DiagnosticReporter",
    "NameFormattingService",
    "NameLists",
    "NameParsingService",
    "NormalizationService",
    # Types (re-exported for compatibility)
    "ParseResult",
    "ParsedName",
    "ParserConfig",
    "TokenJoiningService",
]
