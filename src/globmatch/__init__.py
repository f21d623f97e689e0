"""globmatch glob-style pattern matching toolkit."""

from collections.abc import Sequence

from .engine.matcher import (
    filter_texts,
    match,
    match_all,
    match_any,
    match_core,
    match_multiple,
    match_texts,
)
from .engine.models import (
    EmptyBracketError,
    FilterMode,
    TrailingBackslashError,
    UnclosedBracketError,
    ValidationError,
    ValidationErrorKind,
)
from .engine.validator import check, is_valid, validate


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`globmatch.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "main",
    "match",
    "match_core",
    "match_any",
    "match_all",
    "match_multiple",
    "match_texts",
    "filter_texts",
    "validate",
    "check",
    "is_valid",
    "FilterMode",
    "ValidationError",
    "ValidationErrorKind",
    "UnclosedBracketError",
    "EmptyBracketError",
    "TrailingBackslashError",
]
