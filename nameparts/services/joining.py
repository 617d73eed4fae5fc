"""
Surname particle and conjunction joining.

Particles ("van", "de", "von") are glued to the word after them, and
conjunctions ("y", "and", "of") glue the words on either side, so compound
surnames such as "de Lorenzo y Gutierez" survive as one token.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nameparts.types import Token

if TYPE_CHECKING:
    from nameparts.services.initialization import NameLists

logger = logging.getLogger(__name__)


class TokenJoiningService:
    """Service for merging particles and conjunctions into neighbouring tokens."""

    def __init__(self, name_lists: NameLists):
        self._lists = name_lists

    def join_prefixes(self, tokens: list[Token]) -> list[Token]:
        """
        Merge each particle with the token after it.

        Scanning right to left lets chains ("van der Berg") collapse: the merged
        token already sits in the left slot when the next particle is tested.
        """
        for index in range(len(tokens) - 2, -1, -1):
            if tokens[index].text.lower() in self._lists.prefixes:
                merged = f"{tokens[index].text} {tokens[index + 1].text}"
                tokens[index : index + 2] = [tokens[index].with_text(merged)]
        return tokens

    def join_conjunctions(self, tokens: list[Token]) -> list[Token]:
        """Merge three-token windows whose middle token is a conjunction."""
        index = len(tokens) - 3
        while index >= 0:
            if tokens[index + 1].text.lower() in self._lists.conjunctions:
                merged = " ".join(token.text for token in tokens[index : index + 3])
                tokens[index : index + 3] = [tokens[index].with_text(merged)]
                logger.debug("joined conjunction: %s", merged)
                # The merged token becomes the right end of the next window
                index -= 2
            else:
                index -= 1
        return tokens
