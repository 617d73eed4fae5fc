"""
Diagnostic reporting for full-name parsing.

Every pipeline stage reports through a DiagnosticReporter, which either records
the message on the parsed name or raises when stop-on-error is enabled.
"""
from __future__ import annotations

import logging

from nameparts.types import Diagnostic, DiagnosticKind, NameParseError, ParsedName

logger = logging.getLogger(__name__)


class DiagnosticReporter:
    """Applies the stop-on-error policy for one parse."""

    def __init__(self, parsed: ParsedName, stop_on_error: bool = False):
        self._parsed = parsed
        self._stop_on_error = stop_on_error

    def report(self, kind: DiagnosticKind, count: int | None = None) -> None:
        diagnostic = Diagnostic(kind, count)
        if self._stop_on_error:
            raise NameParseError(diagnostic)
        logger.debug("diagnostic: %s", diagnostic.message)
        self._parsed.error.append(diagnostic.message)
