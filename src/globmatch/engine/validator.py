"""Syntactic pre-flight checks for glob patterns.

The validator is opt-in: :func:`globmatch.engine.matcher.match` never calls
it and treats malformed patterns as plain non-matches instead.
"""
from __future__ import annotations

from .models import (
    EmptyBracketError,
    TrailingBackslashError,
    UnclosedBracketError,
    ValidationError,
)


def check(pattern: str) -> ValidationError | None:
    """Return the first syntax error in ``pattern``, or ``None`` if it is valid."""
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "\\":
            if index + 1 >= length:
                return TrailingBackslashError(pattern, index)
            index += 2
            continue
        if char == "[":
            end = pattern.find("]", index + 1)
            if end == -1:
                return UnclosedBracketError(pattern, index)
            if end == index + 1:
                return EmptyBracketError(pattern, index)
            index = end + 1
            continue
        index += 1
    return None


def validate(pattern: str) -> None:
    """Raise a :class:`ValidationError` subclass if ``pattern`` is malformed.

    Rules:
        - ``\\`` must be followed by a character (:class:`TrailingBackslashError`)
        - every ``[`` needs a later ``]`` (:class:`UnclosedBracketError`)
        - ``[]`` is not allowed (:class:`EmptyBracketError`)

    Examples:
        >>> validate("[a-z]*")
        >>> validate("[abc")
        Traceback (most recent call last):
        ...
        globmatch.engine.models.UnclosedBracketError: UnclosedBracket at position 0 in pattern '[abc'
    """
    error = check(pattern)
    if error is not None:
        raise error


def is_valid(pattern: str) -> bool:
    return check(pattern) is None
