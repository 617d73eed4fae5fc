"""
Configuration types for full-name parsing.

This module contains the immutable parser configuration and the small enums used
to express the tri-state case-fix option and the requested output part.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class FixCase(Enum):
    """Whether to repair the casing of parsed parts."""

    AUTO = "auto"  # only when the trimmed input is all upper or all lower case
    ON = "on"
    OFF = "off"

    @classmethod
    def coerce(cls, value) -> FixCase:
        """Accept enum members, their names, booleans, or the legacy -1/0/1 encoding."""
        if isinstance(value, FixCase):
            return value
        if value is True or value == 1:
            return cls.ON
        if value is False or (value == 0 and not isinstance(value, str)):
            return cls.OFF
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.AUTO
        return cls.AUTO


class PartToReturn(Enum):
    """Which part of the parsed name a caller wants back."""

    TITLE = "title"
    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    NICK = "nick"
    SUFFIX = "suffix"
    ERROR = "error"
    ALL = "all"

    @classmethod
    def coerce(cls, value) -> PartToReturn:
        """Case-insensitive lookup; anything unrecognised means the whole record."""
        if isinstance(value, PartToReturn):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.ALL
        return cls.ALL


def _is_enabled(value) -> bool:
    # Only True and 1 switch a flag on; other truthy values are ignored.
    return value is True or (value == 1 and not isinstance(value, str))


@dataclass(frozen=True)
class ParserConfig:
    """Immutable parser configuration - one instance can be shared across threads."""

    fix_case: FixCase = FixCase.AUTO
    stop_on_error: bool = False
    use_expanded_lists: bool = False
    normalize: bool = False
    part_to_return: PartToReturn = PartToReturn.ALL

    def __post_init__(self):
        # Loosely-typed values (True, -1, "last", 1) are coerced on construction
        object.__setattr__(self, "fix_case", FixCase.coerce(self.fix_case))
        object.__setattr__(self, "stop_on_error", _is_enabled(self.stop_on_error))
        object.__setattr__(self, "use_expanded_lists", _is_enabled(self.use_expanded_lists))
        object.__setattr__(self, "normalize", _is_enabled(self.normalize))
        object.__setattr__(self, "part_to_return", PartToReturn.coerce(self.part_to_return))

    @classmethod
    def create_default(cls) -> ParserConfig:
        return cls()

    @classmethod
    def from_options(
        cls,
        part_to_return=None,
        fix_case=None,
        stop_on_error=False,
        use_expanded_lists=False,
        normalize=False,
    ) -> ParserConfig:
        """Build a configuration from loosely-typed call options."""
        return cls(
            fix_case=fix_case,
            stop_on_error=stop_on_error,
            use_expanded_lists=use_expanded_lists,
            normalize=normalize,
            part_to_return=part_to_return,
        )

    def with_options(self, **changes) -> ParserConfig:
        """Immutable update method."""
        return replace(self, **changes)
