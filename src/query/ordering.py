"""Case-insensitive string ordering.

This module defines the order every sorted listing uses: strings are
compared character by character on lowercased code points, and a
strict prefix sorts before the longer string.
"""

from __future__ import annotations

from typing import Iterable


def less_lower(left: str, right: str) -> bool:
    """Return whether ``left`` sorts before ``right`` ignoring case.

    Args:
        left: First string.
        right: Second string.

    Returns:
        True if the first differing lowercased code point of ``left`` is
        smaller, or ``left`` is a strict prefix of ``right``.
    """
    for left_char, right_char in zip(left, right):
        left_lower = lower_code_point(left_char)
        right_lower = lower_code_point(right_char)
        if left_lower != right_lower:
            return left_lower < right_lower
    return len(left) < len(right)


def lower_code_point(char: str) -> int:
    """Lowercase one character to exactly one code point.

    ``str.lower`` expands a few characters (``"İ"`` becomes ``"i"`` plus a
    combining dot); only the leading code point is kept, which is the
    simple one-to-one case mapping.
    """
    return ord(char.lower()[0])


def case_insensitive_key(value: str) -> tuple[tuple[int, ...], str]:
    """Build a sort key ordering strings like :func:`less_lower`.

    The raw string breaks ties between names that differ only in case,
    so sorting is deterministic.
    """
    return tuple(lower_code_point(char) for char in value), value


def sorted_case_insensitive(values: Iterable[str]) -> list[str]:
    """Sort strings with the case-insensitive order."""
    return sorted(values, key=case_insensitive_key)
