"""
Text preprocessing for full-name parsing.

RESPONSIBILITIES:
- Resolve automatic case repair from the shape of the input
- Remove quoted or bracketed nicknames and store them on the parsed name
- Split what is left into Token pairs, keeping comma positions

This module operates BEFORE any vocabulary lookups.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from nameparts.types import DiagnosticKind, FixCase, Token

if TYPE_CHECKING:
    from nameparts.services.diagnostics import DiagnosticReporter
    from nameparts.types import ParsedName

# A quoted or bracketed word group standing on its own, optionally followed by a comma.
# The trailing \s is consumed, so of two adjacent spans ("(b) (c)") only the first matches.
NICKNAME_PATTERN = re.compile(
    r"\s(?:"
    r"[‘’']([^‘’']+)[‘’']"
    r"|[“”\"]([^“”\"]+)[“”\"]"
    r"|\[([^\]]+)\]"
    r"|\(([^)]+)\)"
    r"),?\s",
)


class TextPreprocessor:
    """Input preparation: case detection, nickname extraction, tokenization."""

    def __init__(self, nickname_pattern: re.Pattern[str] = NICKNAME_PATTERN):
        self._nickname_pattern = nickname_pattern

    @staticmethod
    def resolve_fix_case(text: str, fix_case: FixCase) -> bool:
        """AUTO repairs case only when the whole trimmed input is one case."""
        if fix_case is FixCase.AUTO:
            return text == text.upper() or text == text.lower()
        return fix_case is FixCase.ON

    def extract_nicknames(self, text: str, parsed: ParsedName, reporter: DiagnosticReporter) -> str:
        """Store nicknames on `parsed` and return the text without them."""
        padded = f" {text} "
        matches = list(self._nickname_pattern.finditer(padded))
        if not matches:
            return text

        nicknames = [self._nickname_text(match) for match in matches]
        if len(nicknames) > 1:
            reporter.report(DiagnosticKind.MULTIPLE_NICKNAMES, len(nicknames))
        parsed.nick = ", ".join(nicknames)

        return self._nickname_pattern.sub(" ", padded).strip()

    @staticmethod
    def _nickname_text(match: re.Match[str]) -> str:
        nickname = next(group for group in match.groups() if group is not None)
        return nickname[:-1] if nickname.endswith(",") else nickname

    @staticmethod
    def tokenize(text: str) -> list[Token]:
        """
        Split on whitespace; a trailing comma marks the following token.

        A comma standing alone ("Smith , John") marks the next token as well, and a
        comma after the last word has nothing to mark.
        """
        tokens: list[Token] = []
        pending_comma = False
        for word in text.split():
            has_comma = word.endswith(",")
            if has_comma:
                word = word[:-1]
            if word:
                tokens.append(Token(word, pending_comma))
                pending_comma = has_comma
            else:
                pending_comma = pending_comma or has_comma
        return tokens
