"""
strkit Standard Library - String Module.

Provides single-pass string primitives: numeric detection, trimming,
prefix/suffix tests, ASCII case conversion, repetition and counting.
Case functions only touch ASCII letters.
"""

from __future__ import annotations

from collections.abc import Callable

CharPredicate = Callable[[str], bool]

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_SWAP_CASE = str.maketrans(_ASCII_UPPER + _ASCII_LOWER, _ASCII_LOWER + _ASCII_UPPER)
_WHITESPACE = " \t\n\v\f\r"


def _is_space(ch: str) -> bool:
    return ch in _WHITESPACE


def is_numeric(s: str) -> bool:
    """
    Check if s looks numeric.

    True when s is non-empty and, after an optional leading sign, contains
    at least one ASCII digit.
    """
    if not s:
        return False
    body = s[1:] if s[0] in "+-" else s
    return any("0" <= ch <= "9" for ch in body)


def ltrim_if(s: str, fn: CharPredicate) -> str:
    """Remove leading characters while fn(ch) is true."""
    start = 0
    while start < len(s) and fn(s[start]):
        start += 1
    return s[start:]


def rtrim_if(s: str, fn: CharPredicate) -> str:
    """Remove trailing characters while fn(ch) is true."""
    end = len(s)
    while end > 0 and fn(s[end - 1]):
        end -= 1
    return s[:end]


def trim_if(s: str, lfn: CharPredicate, rfn: CharPredicate | None = None) -> str:
    """Trim the left side with lfn and the right side with rfn (defaults to lfn)."""
    return ltrim_if(rtrim_if(s, rfn or lfn), lfn)


def ltrim(s: str) -> str:
    """Remove leading whitespace."""
    return ltrim_if(s, _is_space)


def rtrim(s: str) -> str:
    """Remove trailing whitespace."""
    return rtrim_if(s, _is_space)


def trim(s: str) -> str:
    """Remove leading and trailing whitespace."""
    return ltrim(rtrim(s))


def starts_with(s: str, prefix: str) -> bool:
    """Check if string starts with prefix."""
    return s.startswith(prefix)


def ends_with(s: str, suffix: str) -> bool:
    """Check if string ends with suffix."""
    return s.endswith(suffix)


def to_upper(s: str) -> str:
    """Convert ASCII letters to uppercase."""
    return s.translate(_TO_UPPER)


def to_lower(s: str) -> str:
    """Convert ASCII letters to lowercase."""
    return s.translate(_TO_LOWER)


def swap_case(s: str) -> str:
    """Swap the case of ASCII letters."""
    return s.translate(_SWAP_CASE)


def is_upper(s: str) -> bool:
    """Check if every character is an ASCII uppercase letter."""
    return all(ch in _ASCII_UPPER for ch in s)


def is_lower(s: str) -> bool:
    """Check if every character is an ASCII lowercase letter."""
    return all(ch in _ASCII_LOWER for ch in s)


def mul(s: str, n: int) -> str:
    """Repeat s n times (negative n gives an empty string)."""
    return s * max(n, 0)


def count(s: str, target: str) -> int:
    """Count non-overlapping occurrences of target; an empty target counts 0."""
    if not target:
        return 0
    return s.count(target)
