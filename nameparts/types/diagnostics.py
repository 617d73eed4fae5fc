"""
Diagnostic types for full-name parsing.

Diagnostics describe recoverable oddities found while parsing (several nicknames,
extra commas, ...). They are collected on the parsed record by default, or turned
into a NameParseError when the caller asks parsing to stop on the first one.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Kinds of parse diagnostics with their message templates."""

    NO_INPUT = "No input"
    MULTIPLE_NICKNAMES = "{count} nicknames found"
    MULTIPLE_SUFFIXES = "{count} suffixes found"
    MULTIPLE_TITLES = "{count} titles found"
    EXTRA_COMMAS = "{count} extra commas found"
    TOO_MANY_MIDDLE_NAMES = "{count} middle names"


@dataclass(frozen=True)
class Diagnostic:
    """One parse diagnostic."""

    kind: DiagnosticKind
    count: int | None = None

    @property
    def message(self) -> str:
        return "Error: " + self.kind.value.format(count=self.count)

    def __str__(self) -> str:
        return self.message


class NameParseError(ValueError):
    """Raised for the first diagnostic when stop-on-error is enabled."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
