"""Data models shared across the globmatch engine."""
from __future__ import annotations

import enum


class ValidationErrorKind(str, enum.Enum):
    UNCLOSED_BRACKET = "UnclosedBracket"
    EMPTY_BRACKET = "EmptyBracket"
    TRAILING_BACKSLASH = "TrailingBackslash"


class FilterMode(str, enum.Enum):
    ANY = "any"
    ALL = "all"


class ValidationError(ValueError):
    """Base class for syntactic pattern errors reported by the validator.

    Attributes:
        kind: Which rule the pattern broke.
        pattern: The pattern that was rejected.
        position: Index of the offending ``[`` or ``\\`` in ``pattern``.
    """

    kind: ValidationErrorKind

    def __init__(self, pattern: str, position: int) -> None:
        self.pattern = pattern
        self.position = position
        super().__init__(f"{self.kind.value} at position {position} in pattern {pattern!r}")


class UnclosedBracketError(ValidationError):
    kind = ValidationErrorKind.UNCLOSED_BRACKET


class EmptyBracketError(ValidationError):
    kind = ValidationErrorKind.EMPTY_BRACKET


class TrailingBackslashError(ValidationError):
    kind = ValidationErrorKind.TRAILING_BACKSLASH
