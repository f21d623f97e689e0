"""Pattern matching primitives.

Supported syntax:

- ``*`` matches any number of characters, including none
- ``?`` matches exactly one character
- ``[abc]`` matches one character of the set, ``[a-z]`` one of the range
- ``\\x`` matches ``x`` literally
- a leading ``!`` negates the whole pattern

Matching is total: malformed patterns (unclosed or empty brackets, a dangling
backslash) never raise, they simply fail to match.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .charclass import match_character_class
from .models import FilterMode

logger = logging.getLogger(__name__)

_MISMATCH = -1
_MALFORMED = -2


def _match_token(pattern: str, p_idx: int, char: str) -> int:
    """Match the single-character token at ``p_idx`` against ``char``.

    Returns the pattern index after the token, ``_MISMATCH`` if ``char`` is
    not accepted, or ``_MALFORMED`` for a dangling backslash or an unclosed or
    empty bracket.
    """
    p_char = pattern[p_idx]
    if p_char == "\\":
        if p_idx + 1 >= len(pattern):
            return _MALFORMED
        return p_idx + 2 if pattern[p_idx + 1] == char else _MISMATCH
    if p_char == "?":
        return p_idx + 1
    if p_char == "[":
        end_bracket = pattern.find("]", p_idx + 1)
        if end_bracket == -1 or end_bracket == p_idx + 1:
            return _MALFORMED
        if match_character_class(pattern[p_idx + 1 : end_bracket], char):
            return end_bracket + 1
        return _MISMATCH
    return p_idx + 1 if p_char == char else _MISMATCH


def match_core(pattern: str, text: str) -> bool:
    """Match ``text`` against ``pattern`` without interpreting a leading ``!``.

    Every token other than ``*`` consumes exactly one text character, so on a
    mismatch it is enough to let the most recent ``*`` swallow one more
    character and resume just after it; earlier stars never need revisiting.
    The verdict is the one obtained by trying every split point for every
    star, in O(len(pattern) * len(text)) time and without recursion.

    A malformed token fails every split that reaches it, so it ends the match
    at once.
    """
    p_len = len(pattern)
    t_len = len(text)
    p_idx = t_idx = 0
    star_p = -1
    star_t = 0
    while t_idx < t_len:
        if p_idx < p_len and pattern[p_idx] == "*":
            while p_idx < p_len and pattern[p_idx] == "*":
                p_idx += 1
            star_p = p_idx
            star_t = t_idx
            continue
        next_p = _match_token(pattern, p_idx, text[t_idx]) if p_idx < p_len else _MISMATCH
        if next_p == _MALFORMED:
            return False
        if next_p != _MISMATCH:
            p_idx = next_p
            t_idx += 1
        elif star_p != -1:
            star_t += 1
            t_idx = star_t
            p_idx = star_p
        else:
            return False

    # trailing stars match the empty remainder
    while p_idx < p_len and pattern[p_idx] == "*":
        p_idx += 1
    return p_idx == p_len


def match(pattern: str, text: str) -> bool:
    """Return ``True`` if ``text`` matches the glob ``pattern``.

    A leading ``!`` inverts the verdict of the rest of the pattern. It is
    only recognized once, so ``!!x`` is the negation of the literal ``!x``.

    Both arguments are ``str`` and are compared one code point at a time, so
    ``?`` consumes a single code point such as ``"\u00e9"``, not a byte.
    ``bytes`` arguments are not supported.

    Examples:
        >>> match("Letter[0-9]", "Letter5")
        True
        >>> match("!*.tmp", "file.tmp")
        False
    """
    if pattern.startswith("!"):
        return not match_core(pattern[1:], text)
    return match_core(pattern, text)


def match_any(patterns: Iterable[str], text: str) -> bool:
    """True if at least one pattern matches; ``False`` for no patterns."""
    for pattern in patterns:
        if match(pattern, text):
            return True
    return False


def match_all(patterns: Iterable[str], text: str) -> bool:
    """True if every pattern matches; ``True`` for no patterns."""
    for pattern in patterns:
        if not match(pattern, text):
            return False
    return True


match_multiple = match_any


def match_texts(pattern: str, texts: Sequence[str]) -> list[bool]:
    return [match(pattern, text) for text in texts]


def filter_texts(
    patterns: Iterable[str], texts: Iterable[str], mode: FilterMode | str = FilterMode.ANY
) -> list[str]:
    """Keep the texts accepted by ``patterns``, preserving their order.

    Args:
        patterns: Glob patterns, each may carry a leading ``!``
        texts: Candidate strings
        mode: ``"any"`` keeps a text when one pattern matches it,
            ``"all"`` only when every pattern does

    Raises:
        ValueError: if ``mode`` is not a known :class:`FilterMode`
    """
    patterns = tuple(patterns)
    mode = FilterMode(mode)
    combine = match_any if mode is FilterMode.ANY else match_all
    kept = [text for text in texts if combine(patterns, text)]
    logger.debug("filter_texts mode=%s patterns=%d kept=%d", mode.value, len(patterns), len(kept))
    return kept
