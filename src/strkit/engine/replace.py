"""
strkit Replace Engine.

Substitutes the first, last, or every occurrence of a literal target or a
pattern. A target that does not occur leaves the input unchanged.
"""

from __future__ import annotations

from enum import Enum

from strkit.engine.matcher import PatternLike, SubstituteMode, compile_pattern
from strkit.engine.split import join, split_exact


class ReplaceMode(Enum):
    """Which occurrences replace() substitutes."""

    ALL = "all"
    FIRST = "first"
    LAST = "last"


# =============================================================================
# Literal targets
# =============================================================================


def replace_all(s: str, target: str, replacement: str) -> str:
    """Replace every occurrence of target (split on target, rejoin with replacement)."""
    if not target:
        return s
    return join(split_exact(s, target, keep_empty=True), replacement)


def replace_first(s: str, target: str, replacement: str) -> str:
    """Replace the left-most occurrence of target."""
    if not target:
        return s
    pos = s.find(target)
    if pos == -1:
        return s
    return s[:pos] + replacement + s[pos + len(target):]


def replace_last(s: str, target: str, replacement: str) -> str:
    """Replace the right-most occurrence of target."""
    if not target:
        return s
    pos = s.rfind(target)
    if pos == -1:
        return s
    return s[:pos] + replacement + s[pos + len(target):]


# =============================================================================
# Pattern targets
# =============================================================================


def regex_replace(s: str, pattern: PatternLike, replacement: str) -> str:
    """Replace every match of pattern; replacement may use $1-style references."""
    return compile_pattern(pattern).substitute(s, replacement, SubstituteMode.ALL)


def regex_replace_first(s: str, pattern: PatternLike, replacement: str) -> str:
    """Replace the first match of pattern."""
    return compile_pattern(pattern).substitute(s, replacement, SubstituteMode.FIRST)


def regex_replace_last(s: str, pattern: PatternLike, replacement: str) -> str:
    """
    Replace the match that starts right-most in s.

    Example:
        regex_replace_last("a1b22c", r"\\d+", "#") -> "a1b2#c"
    """
    matcher = compile_pattern(pattern)
    match = matcher.find_last(s)
    if match is None:
        return s
    return matcher.substitute_match(s, match, replacement)


def replace(
    s: str,
    target: PatternLike,
    replacement: str,
    mode: ReplaceMode = ReplaceMode.ALL,
    *,
    regex: bool = False,
) -> str:
    """
    Replace occurrences of target in s.

    Args:
        s: Input string
        target: Literal text, or a pattern when regex is True
        replacement: Replacement text ($-references apply in regex mode)
        mode: ALL, FIRST or LAST
        regex: Treat target as a pattern

    Example:
        replace("aXbXc", "X", "-", ReplaceMode.FIRST) -> "a-bXc"
        replace("aXbXc", "X", "-", ReplaceMode.LAST) -> "aXb-c"
    """
    mode = ReplaceMode(mode)
    if regex:
        handlers = {
            ReplaceMode.ALL: regex_replace,
            ReplaceMode.FIRST: regex_replace_first,
            ReplaceMode.LAST: regex_replace_last,
        }
        return handlers[mode](s, target, replacement)

    if not isinstance(target, str):
        raise TypeError("Literal replace requires a str target; pass regex=True for patterns")
    literal_handlers = {
        ReplaceMode.ALL: replace_all,
        ReplaceMode.FIRST: replace_first,
        ReplaceMode.LAST: replace_last,
    }
    return literal_handlers[mode](s, target, replacement)
