"""
Normalization service for full-name parsing.

Maps synonym spellings of titles and suffixes ("doctor", "dr" -> "Dr.";
"junior", "2nd" -> "Jr.") to one canonical abbreviation. Fields holding several
comma-joined values are normalized piece by piece.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from nameparts.services.initialization import strip_period

if TYPE_CHECKING:
    from collections.abc import Mapping

    from nameparts.services.initialization import NameLists
    from nameparts.types import ParsedName

SEPARATOR = ", "


class NormalizationService:
    """Pure normalization service."""

    def __init__(self, name_lists: NameLists):
        self._lists = name_lists

    def apply(self, parsed: ParsedName) -> ParsedName:
        parsed.title = self.normalize_title(parsed.title)
        parsed.suffix = self.normalize_suffix(parsed.suffix)
        return parsed

    def normalize_title(self, value: str) -> str:
        return self._normalize(value, self._lists.title_synonyms)

    def normalize_suffix(self, value: str) -> str:
        return self._normalize(value, self._lists.suffix_synonyms)

    @staticmethod
    def _normalize(value: str, synonyms: Mapping[str, str]) -> str:
        if not value:
            return value
        pieces = []
        for piece in value.split(SEPARATOR):
            key = strip_period(piece.strip()).lower()
            pieces.append(synonyms.get(key, piece))
        return SEPARATOR.join(pieces)
