"""
Name parsing service for full-name parsing.

This module assigns the remaining tokens to last, first and middle names. Commas
decide the order: "Last, First Middle" puts everything before the first comma
into the surname, and comma-separated words trailing the name ("..., Jr., CPA")
are harvested as extra suffixes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nameparts.types import DiagnosticKind

if TYPE_CHECKING:
    from nameparts.services.diagnostics import DiagnosticReporter
    from nameparts.services.initialization import NameLists
    from nameparts.types import ParsedName, Token

logger = logging.getLogger(__name__)


class NameParsingService:
    """Service for splitting tokens into last, first and middle names."""

    def __init__(self, name_lists: NameLists):
        self._lists = name_lists

    def assign_last_name(self, tokens: list[Token], parsed: ParsedName, reporter: DiagnosticReporter) -> list[Token]:
        """Harvest trailing comma suffixes, then remove and store the surname."""
        # A comma in front of the first token separates nothing
        markers = [index > 0 and token.comma for index, token in enumerate(tokens)]
        first_comma = markers.index(True) if True in markers else -1
        remaining_commas = markers.count(True)

        if first_comma > 1 or remaining_commas > 1:
            found: list[str] = []
            for index in range(len(tokens) - 1, 1, -1):
                if not markers[index]:
                    break
                found.insert(0, tokens.pop(index).text)
                markers.pop(index)
                remaining_commas -= 1
            if found:
                logger.debug("suffixes after commas: %s", found)
                if parsed.suffix:
                    found.insert(0, parsed.suffix)
                parsed.suffix = ", ".join(found)

        if remaining_commas > 0:
            if remaining_commas > 1:
                reporter.report(DiagnosticKind.EXTRA_COMMAS, remaining_commas - 1)
            comma_index = markers.index(True)
            parsed.last = " ".join(token.text for token in tokens[:comma_index])
            del tokens[:comma_index]
        elif tokens:
            parsed.last = tokens.pop().text
        return tokens

    def assign_given_names(self, tokens: list[Token], parsed: ParsedName, reporter: DiagnosticReporter) -> None:
        """Store the first token as the first name and the rest as middle names."""
        if tokens and tokens[0].text.lower() in self._lists.suffixes:
            # Left at the front by comma reordering, e.g. "Smith, Jr. John"
            parsed.suffix = tokens.pop(0).text
        if not tokens:
            return
        parsed.first = tokens.pop(0).text
        if not tokens:
            return

        if len(tokens) > 2:
            reporter.report(DiagnosticKind.TOO_MANY_MIDDLE_NAMES, len(tokens))
        parsed.middle = " ".join(token.text for token in tokens)
