"""
Data initialization service for full-name parsing.

This module turns the static vocabularies in name_lists_data into immutable
lookup structures. One NameLists instance exists per list selection and is shared
by reference between parses.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from types import MappingProxyType

from nameparts.name_lists_data import (
    CONJUNCTIONS,
    FORCE_CASE,
    PREFIXES,
    PREFIXES_EXPANDED,
    SUFFIX_SYNONYMS,
    SUFFIXES,
    TITLE_SYNONYMS,
    TITLES,
    TITLES_EXPANDED,
)


@dataclass(frozen=True)
class NameLists:
    """Immutable container for all classification vocabularies."""

    titles: frozenset[str]
    suffixes: frozenset[str]
    prefixes: frozenset[str]
    conjunctions: frozenset[str]

    # lowercase word -> canonical casing
    force_case: MappingProxyType

    # lowercase synonym (no trailing period) -> canonical abbreviation
    title_synonyms: MappingProxyType
    suffix_synonyms: MappingProxyType

    def is_title(self, word: str) -> bool:
        """Period-insensitive title lookup."""
        key = strip_period(word).lower()
        return key in self.titles or key + "." in self.titles

    def is_suffix(self, word: str) -> bool:
        """Period-insensitive suffix lookup."""
        key = strip_period(word).lower()
        return key in self.suffixes or key + "." in self.suffixes


def strip_period(word: str) -> str:
    """Remove one trailing period."""
    return word[:-1] if word.endswith(".") else word


class DataInitializationService:
    """Service to build the vocabulary lookup structures."""

    @staticmethod
    def load(use_expanded_lists: bool = False) -> NameLists:
        return _build_name_lists(bool(use_expanded_lists))


@cache  # one entry per list selection
def _build_name_lists(use_expanded_lists: bool) -> NameLists:
    titles = TITLES_EXPANDED if use_expanded_lists else TITLES
    prefixes = PREFIXES_EXPANDED if use_expanded_lists else PREFIXES

    force_case = {}
    for word in FORCE_CASE:
        # First spelling wins for duplicates
        force_case.setdefault(word.lower(), word)

    return NameLists(
        titles=frozenset(titles),
        suffixes=frozenset(SUFFIXES),
        prefixes=frozenset(prefixes),
        conjunctions=frozenset(CONJUNCTIONS),
        force_case=MappingProxyType(force_case),
        title_synonyms=MappingProxyType(dict(TITLE_SYNONYMS)),
        suffix_synonyms=MappingProxyType(dict(SUFFIX_SYNONYMS)),
    )
