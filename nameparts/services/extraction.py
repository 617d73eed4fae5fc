"""
Title and suffix extraction for full-name parsing.

Both extractors scan the token list right to left, remove matching tokens, and
keep the removed tokens in their original order. Words such as "Dr" or "Prof"
are valid as either a title or a suffix; the suffix pass only claims them when
another token of the name is already a title, otherwise they are left for the
title pass.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nameparts.types import DiagnosticKind, Token

if TYPE_CHECKING:
    from nameparts.services.diagnostics import DiagnosticReporter
    from nameparts.services.initialization import NameLists
    from nameparts.types import ParsedName

logger = logging.getLogger(__name__)


def remove_token(tokens: list[Token], index: int) -> Token:
    """Remove one token, handing its comma marker on to the token that follows it."""
    removed = tokens.pop(index)
    if removed.comma and index < len(tokens):
        following = tokens[index]
        tokens[index] = Token(following.text, True)
    return removed


class AffixExtractionService:
    """Service for pulling suffixes and titles out of the token list."""

    def __init__(self, name_lists: NameLists):
        self._lists = name_lists

    def extract_suffixes(self, tokens: list[Token], parsed: ParsedName, reporter: DiagnosticReporter) -> list[Token]:
        """Remove suffixes (never the first token) and store them on `parsed`."""
        snapshot = [token.text for token in tokens]
        found: list[str] = []

        for index in range(len(tokens) - 1, 0, -1):
            word = tokens[index].text
            if not self._lists.is_suffix(word):
                continue
            if self._lists.is_title(word) and not self._has_other_title(snapshot, index):
                continue
            found.insert(0, remove_token(tokens, index).text)

        if found:
            logger.debug("suffixes found: %s", found)
            if len(found) > 1:
                reporter.report(DiagnosticKind.MULTIPLE_SUFFIXES, len(found))
            parsed.suffix = ", ".join(found)
        return tokens

    def extract_titles(self, tokens: list[Token], parsed: ParsedName, reporter: DiagnosticReporter) -> list[Token]:
        """Remove titles from any position and store them on `parsed`."""
        found: list[str] = []

        for index in range(len(tokens) - 1, -1, -1):
            if self._lists.is_title(tokens[index].text):
                found.insert(0, remove_token(tokens, index).text)

        if found:
            logger.debug("titles found: %s", found)
            if len(found) > 1:
                reporter.report(DiagnosticKind.MULTIPLE_TITLES, len(found))
            parsed.title = ", ".join(found)
        return tokens

    def _has_other_title(self, words: list[str], index: int) -> bool:
        # Positions refer to the list as it was before any suffix was removed
        return any(self._lists.is_title(word) for position, word in enumerate(words) if position != index)
