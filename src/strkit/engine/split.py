"""
strkit Split Engine.

Tokenizes a string by a set of delimiter characters or by a pattern.

Empty-token policy:
    keep_empty=False  runs of delimiters act as one separator and leading
                      or trailing delimiters produce nothing
    keep_empty=True   every delimiter occurrence is a split point, so N
                      occurrences give N + 1 tokens
"""

from __future__ import annotations

from collections.abc import Iterable

from strkit.engine.matcher import PatternLike, compile_pattern


def split(s: str, delimiters: str, keep_empty: bool = False) -> list[str]:
    """
    Split s on any of the characters in delimiters.

    Example:
        split("a,,b", ",") -> ["a", "b"]
        split("a,,b", ",", keep_empty=True) -> ["a", "", "b"]
        split("", ",") -> []
        split("", ",", keep_empty=True) -> [""]
    """
    delimiter_set = frozenset(delimiters)
    tokens: list[str] = []
    start = 0

    for pos, char in enumerate(s):
        if char in delimiter_set:
            if keep_empty or pos > start:
                tokens.append(s[start:pos])
            start = pos + 1

    if keep_empty or start < len(s):
        tokens.append(s[start:])
    return tokens


def split_exact(s: str, separator: str, keep_empty: bool = False) -> list[str]:
    """
    Split s on every non-overlapping occurrence of the whole separator string.

    An empty separator never matches, so s comes back as the only token
    (or no tokens for an empty s when keep_empty is False).
    """
    if not separator:
        return [s] if keep_empty or s else []
    tokens = s.split(separator)
    if keep_empty:
        return tokens
    return [token for token in tokens if token]


def regex_split(s: str, pattern: PatternLike, keep_empty: bool = False) -> list[str]:
    """
    Split s on every non-overlapping match of pattern.

    With keep_empty=True a trailing empty token is produced only when a
    match (possibly zero-width) ends at the end of s.

    Example:
        regex_split("a1b22c", r"\\d+") -> ["a", "b", "c"]
        regex_split("a1b2", r"\\d", keep_empty=True) -> ["a", "b", ""]
    """
    matcher = compile_pattern(pattern)
    tokens: list[str] = []
    start = 0

    for span in matcher.find_all(s):
        tokens.append(s[start:span.start])
        start = span.end
    tokens.append(s[start:])

    if keep_empty:
        return tokens
    return [token for token in tokens if token]


def join(parts: Iterable[str], connector: str) -> str:
    """Join parts in order, placing connector between neighbours."""
    return connector.join(parts)
