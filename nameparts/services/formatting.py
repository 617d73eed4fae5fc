"""
Name formatting service for full-name parsing.

This module repairs the capitalisation of parsed name parts, typically for input
that arrived in ALL CAPS or all lower case.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from nameparts.types import NAME_FIELDS

if TYPE_CHECKING:
    from nameparts.services.initialization import NameLists
    from nameparts.types import ParsedName


class NameFormattingService:
    """Service for restoring natural casing of name parts."""

    def __init__(self, name_lists: NameLists):
        self._lists = name_lists

    def fix_case(self, parsed: ParsedName) -> ParsedName:
        """Re-case every populated name part in place; the error list is untouched."""
        for part in NAME_FIELDS:
            value = getattr(parsed, part)
            if value:
                setattr(parsed, part, " ".join(self.fix_word_case(word, part) for word in value.split(" ")))
        return parsed

    def fix_word_case(self, word: str, part: str) -> str:
        forced = self._lists.force_case.get(word.lower())
        if forced is not None:
            return forced

        # Initials
        if len(word) == 1:
            return word.upper()

        if self._is_mc_case(word):
            return word[:3] + word[3:].lower()

        if part == "suffix" and not word.endswith(".") and word.lower() not in self._lists.suffixes:
            # Unknown suffixes are usually acronyms ("lutc" -> "LUTC")
            return word.upper() if word == word.lower() else word

        return self.capitalize_name_part(word)

    @staticmethod
    def _is_mc_case(word: str) -> bool:
        """McDONALD, or McDonald once repaired."""
        if len(word) <= 2:
            return False
        if word[0] != word[0].upper() or word[1] != word[1].lower():
            return False
        rest = word[2:]
        return rest == rest.upper() or (word[2] == word[2].upper() and word[3:] == word[3:].lower())

    @staticmethod
    def capitalize_name_part(part: str) -> str:
        """Capitalize the first letter only; hyphens and apostrophes get no special treatment."""
        if not part:
            return part
        return part[0].upper() + part[1:].lower()
