"""
Result types for full-name parsing.

This module contains the token pairs that flow between pipeline stages, the
mutable ParsedName accumulator, and the Either-like ParseResult returned to
callers.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from nameparts.types.diagnostics import NameParseError

NAME_FIELDS = ("title", "first", "middle", "last", "nick", "suffix")


@dataclass(frozen=True)
class Token:
    """A word of the input and whether a comma separated it from the previous word."""

    text: str
    comma: bool = False

    def with_text(self, text: str) -> Token:
        return Token(text, self.comma)


@dataclass
class ParsedName:
    """Accumulator for the parts of one name; fresh for every parse."""

    title: str = ""
    first: str = ""
    middle: str = ""
    last: str = ""
    nick: str = ""
    suffix: str = ""
    error: list[str] = field(default_factory=list)

    def get(self, part: str) -> str | list[str]:
        if part not in NAME_FIELDS and part != "error":
            raise KeyError(part)
        return getattr(self, part)

    def as_dict(self) -> dict[str, str | list[str]]:
        parts: dict[str, str | list[str]] = {name: getattr(self, name) for name in NAME_FIELDS}
        parts["error"] = list(self.error)
        return parts

    def as_tuple(self) -> tuple[str, ...]:
        """The six name parts in NAME_FIELDS order."""
        return tuple(getattr(self, name) for name in NAME_FIELDS)


@dataclass(frozen=True)
class ParseResult:
    """Result of a parse operation - Scala Either-like structure."""

    success: bool
    result: ParsedName | None
    error_message: str | None = None
    error: NameParseError | None = None

    @classmethod
    def success_with_name(cls, parsed: ParsedName) -> ParseResult:
        return cls(success=True, result=parsed)

    @classmethod
    def failure(cls, error: NameParseError) -> ParseResult:
        return cls(success=False, result=None, error_message=str(error), error=error)

    def unwrap(self) -> ParsedName:
        """Return the parsed record, or raise the error that stopped parsing."""
        if self.success:
            return self.result
        raise self.error
