"""
Pattern matcher adapter over the ``re`` module.

Provides the three matching capabilities the split and replace engines
rely on: find the first match, find all non-overlapping matches, and
substitute with group references. Replacement strings use ``$`` style
references:

    $0 or $&   whole match
    $1 .. $99  capture groups
    $`         text before the match
    $'         text after the match
    $$         a literal '$'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache
from typing import Optional, Union

logger = logging.getLogger(__name__)

PatternLike = Union[str, "re.Pattern[str]", "PatternMatcher"]

_REFERENCE_RE = re.compile(r"\$(\$|&|`|'|[0-9]{1,2})")


class SubstituteMode(Enum):
    """How many matches substitute() replaces."""

    FIRST = auto()
    ALL = auto()


@dataclass(frozen=True, slots=True)
class Span:
    """
    A match location.

    Attributes:
        start: Offset of the first matched character
        length: Number of matched characters (0 for empty matches)
        groups: Captured sub-groups, None for groups that did not take part
    """

    start: int
    length: int
    groups: tuple[Optional[str], ...] = ()

    @property
    def end(self) -> int:
        return self.start + self.length

    @classmethod
    def from_match(cls, match: re.Match[str]) -> Span:
        return cls(match.start(), match.end() - match.start(), match.groups())


@lru_cache(maxsize=128)
def _compile(pattern: str) -> re.Pattern[str]:
    logger.debug("compiling pattern %r", pattern)
    return re.compile(pattern)


def expand_replacement(match: re.Match[str], replacement: str) -> str:
    """
    Expand ``$`` references in a replacement string against a match.

    References to groups that do not exist are left as written.
    """
    if "$" not in replacement:
        return replacement

    subject = match.string
    group_count = match.re.groups

    def _expand(ref: re.Match[str]) -> str:
        token = ref.group(1)
        if token == "$":
            return "$"
        if token == "&":
            return match.group(0)
        if token == "`":
            return subject[: match.start()]
        if token == "'":
            return subject[match.end():]
        number = int(token)
        if number > group_count and len(token) == 2:
            # "$12" with a single group means group 1 followed by "2"
            number, trailing = int(token[0]), token[1]
        else:
            trailing = ""
        if number > group_count:
            return ref.group(0)
        return (match.group(number) or "") + trailing

    return _REFERENCE_RE.sub(_expand, replacement)


class PatternMatcher:
    """
    Compiled pattern with find/substitute operations.

    Usage:
        matcher = PatternMatcher(r"(\\d+)")
        matcher.find_first("a12b")          # Span(start=1, length=2, groups=("12",))
        matcher.substitute("a1b2", "<$1>")  # "a<1>b<2>"
    """

    def __init__(self, pattern: Union[str, re.Pattern[str]]) -> None:
        if isinstance(pattern, re.Pattern):
            self.pattern = pattern
        else:
            self.pattern = _compile(pattern)

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern.pattern!r})"

    def find_first(self, s: str) -> Optional[Span]:
        """Return the first match in s, or None."""
        match = self.pattern.search(s)
        return Span.from_match(match) if match else None

    def find_all(self, s: str) -> list[Span]:
        """Return all non-overlapping matches in s, left to right."""
        return [Span.from_match(m) for m in self.pattern.finditer(s)]

    def find_last(self, s: str) -> Optional[re.Match[str]]:
        """
        Return the match that starts right-most in s, or None.

        Start positions are tried from the end of s backward, so a match
        overlapping an earlier one (e.g. "aa" in "aaa" at offset 1) is found.
        Worst case is one match attempt per position.
        """
        for pos in range(len(s), -1, -1):
            match = self.pattern.match(s, pos)
            if match is not None:
                return match
        return None

    def substitute(
        self,
        s: str,
        replacement: str,
        mode: SubstituteMode = SubstituteMode.ALL,
    ) -> str:
        """Replace the first or every match in s, expanding ``$`` references."""
        count = 1 if mode is SubstituteMode.FIRST else 0
        return self.pattern.sub(lambda m: expand_replacement(m, replacement), s, count=count)

    def substitute_match(self, s: str, match: re.Match[str], replacement: str) -> str:
        """Replace exactly the span of one match in s."""
        return s[: match.start()] + expand_replacement(match, replacement) + s[match.end():]


def compile_pattern(pattern: PatternLike) -> PatternMatcher:
    """Return a PatternMatcher for a pattern string, compiled pattern, or matcher."""
    if isinstance(pattern, PatternMatcher):
        return pattern
    return PatternMatcher(pattern)
