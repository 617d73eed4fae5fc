"""
Full Name Parsing Module

This module decomposes a free-form personal name such as
"Dr. Jüan Martinez (Martin) de Lorenzo y Gutierez Jr." into title, first,
middle, last, nickname and suffix.

## Overview

The core functionality is provided by the `FullNameParser` class, which runs a
fixed, order-sensitive pipeline over a list of `Token` pairs:

1. **Preprocessing**: Trim input, decide on case repair, pull out nicknames
2. **Tokenization**: Split on whitespace, remember where commas were
3. **Suffix Extraction**: Remove suffixes, disambiguating "Dr"/"Prof" style words
4. **Title Extraction**: Remove titles from any position
5. **Joining**: Glue surname particles and conjunctions to their neighbours
6. **Comma Reordering**: "Last, First" handling and trailing comma suffixes
7. **Given Names**: First token is the first name, the rest are middle names
8. **Normalization** (optional): Map title/suffix synonyms to one spelling
9. **Case Repair** (optional): Restore natural casing of ALL CAPS or lower-case input

## Usage Examples

```python
from nameparts import FullNameParser, parse_full_name

parse_full_name("Sammy Davis, Jr.").suffix
# Returns: "Jr."

parser = FullNameParser()
result = parser.parse("de Lorenzo y Gutierez, Mr. Jüan Martinez (Martin) Jr.")
if result.success:
    print(result.result.last)  # "de Lorenzo y Gutierez"

parse_full_name("Mr. Jüan Martinez (Martin) de Lorenzo y Gutierez Jr.", "nick")
# Returns: "Martin"
```

## Error Handling

Oddities found while parsing are reported as diagnostics:
- `"Error: No input"`: input missing, empty or not a string
- `"Error: 2 nicknames found"`: several quoted/bracketed parts
- `"Error: 2 suffixes found"` / `"Error: 2 titles found"`
- `"Error: 1 extra commas found"`: more commas than "Last, First" needs
- `"Error: 3 middle names"`: more than two middle names

By default they are collected on `ParsedName.error` and parsing continues. With
`stop_on_error` the first diagnostic ends the parse: `parse()` returns a failed
`ParseResult`, while `extract()` and `parse_full_name()` raise `NameParseError`.

## Thread Safety

A parser holds only immutable configuration and vocabularies; all per-name state
lives inside one `parse()` call. One instance can be shared across threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nameparts.services import (
    AffixExtractionService,
    DataInitializationService,
    DiagnosticReporter,
    NameFormattingService,
    NameParsingService,
    NormalizationService,
    ParsedName,
    ParserConfig,
    ParseResult,
    TokenJoiningService,
)
from nameparts.text_processing.text_preprocessor import TextPreprocessor
from nameparts.types import DiagnosticKind, NameParseError, PartToReturn

logger = logging.getLogger(__name__)

# ════════════════════════════════════════════════════════════════════════════════
# MAIN FULL NAME PARSER CLASS
# ════════════════════════════════════════════════════════════════════════════════


class FullNameParser:
    """Main full-name parsing service."""

    def __init__(self, config: ParserConfig | None = None):
        self._config = config or ParserConfig.create_default()
        self._lists = DataInitializationService.load(self._config.use_expanded_lists)

        self._preprocessor = TextPreprocessor()
        self._extraction_service = AffixExtractionService(self._lists)
        self._joining_service = TokenJoiningService(self._lists)
        self._parsing_service = NameParsingService(self._lists)
        self._normalization_service = NormalizationService(self._lists)
        self._formatting_service = NameFormattingService(self._lists)

    def parse(self, raw_name) -> ParseResult:
        """
        Main API method: parse one name.

        Returns ParseResult with:
        - success=True, result=ParsedName (diagnostics in result.error)
        - success=False, error_message=first diagnostic when stop_on_error is set
        """
        parsed = ParsedName()
        reporter = DiagnosticReporter(parsed, self._config.stop_on_error)
        try:
            fix_case = self._run_pipeline(raw_name, parsed, reporter)
        except NameParseError as e:
            logger.info("stopped parsing %r: %s", raw_name, e)
            return ParseResult.failure(e)

        if self._config.normalize:
            self._normalization_service.apply(parsed)
        if fix_case:
            self._formatting_service.fix_case(parsed)
        return ParseResult.success_with_name(parsed)

    def parse_batch(self, names: Iterable) -> list[ParseResult]:
        """Parse several names with the same configuration."""
        return [self.parse(name) for name in names]

    def extract(self, raw_name) -> ParsedName | str | list[str]:
        """Parse and return the part selected by `part_to_return`; raise on stop-on-error failures."""
        parsed = self.parse(raw_name).unwrap()
        part = self._config.part_to_return
        if part is PartToReturn.ALL:
            return parsed
        return parsed.get(part.value)

    def _run_pipeline(self, raw_name, parsed: ParsedName, reporter: DiagnosticReporter) -> bool:
        """Fill `parsed` stage by stage; returns whether case repair applies."""
        if not raw_name or not isinstance(raw_name, str):
            reporter.report(DiagnosticKind.NO_INPUT)
            return False

        text = raw_name.strip()
        fix_case = self._preprocessor.resolve_fix_case(text, self._config.fix_case)

        text = self._preprocessor.extract_nicknames(text, parsed, reporter)
        tokens = self._preprocessor.tokenize(text)
        if not tokens:
            return fix_case

        tokens = self._extraction_service.extract_suffixes(tokens, parsed, reporter)
        tokens = self._extraction_service.extract_titles(tokens, parsed, reporter)
        if not tokens:
            return fix_case

        tokens = self._joining_service.join_prefixes(tokens)
        tokens = self._joining_service.join_conjunctions(tokens)
        logger.debug("tokens before reordering: %s", tokens)

        tokens = self._parsing_service.assign_last_name(tokens, parsed, reporter)
        self._parsing_service.assign_given_names(tokens, parsed, reporter)
        return fix_case


def parse_full_name(
    name,
    part_to_return="all",
    fix_case=None,
    stop_on_error=False,
    use_expanded_lists=False,
    normalize=False,
) -> ParsedName | str | list[str]:
    """
    Parse `name` and return the whole record, one part, or the error list.

    Options may be given loosely: `fix_case` accepts None/-1 (auto), True/1 or
    False/0; the flags accept True/1; `part_to_return` is case-insensitive and
    falls back to "all".
    """
    config = ParserConfig.from_options(
        part_to_return=part_to_return,
        fix_case=fix_case,
        stop_on_error=stop_on_error,
        use_expanded_lists=use_expanded_lists,
        normalize=normalize,
    )
    return FullNameParser(config).extract(name)
