"""Bracket expression membership."""
from __future__ import annotations


def match_character_class(chars: str, target: str) -> bool:
    """Return ``True`` if ``target`` belongs to the class body ``chars``.

    ``chars`` is the text between ``[`` and ``]``. ``x-y`` is an inclusive
    code point range when a character follows the ``-``; anything else is a
    literal member. A descending range such as ``z-a`` contains nothing.
    """
    index = 0
    length = len(chars)
    while index < length:
        if index + 2 < length and chars[index + 1] == "-":
            if chars[index] <= target <= chars[index + 2]:
                return True
            index += 3
        else:
            if chars[index] == target:
                return True
            index += 1
    return False
