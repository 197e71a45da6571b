"""
strkit Template Formatter.

Expands templates containing positional placeholders:

    {}      automatic field numbering (next unused argument)
    {N}     manual field numbering (argument N)
    {{ }}   literal braces
    {text}  non-numeric body, echoed back verbatim

A template is locked to whichever numbering style it uses first. The
template is scanned once, left to right, and errors are reported for the
first offending position.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Union

from strkit.engine.args import ArgumentList
from strkit.utils.errors import (
    FormatError,
    PrintfFormatError,
    SourceLocation,
    StrayClosingBraceError,
    StyleConflictError,
    UnterminatedPlaceholderError,
)
from strkit.utils.result import Err, Ok, Result

_INDEX_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_MAX_INDEX_DIGITS = 18


class PlaceholderKind(Enum):
    """Kinds of parsed placeholder."""

    LITERAL = auto()         # {{ or }}
    AUTO_INDEXED = auto()    # {}
    MANUAL_INDEXED = auto()  # {N}
    PASSTHROUGH = auto()     # {text}


class NumberingStyle(Enum):
    """Field numbering style a template is locked to."""

    UNSET = auto()
    AUTO = auto()
    MANUAL = auto()


@dataclass(frozen=True, slots=True)
class Placeholder:
    """
    A parsed placeholder.

    Attributes:
        kind: What the placeholder does
        location: Position of its opening brace in the template
        index: Argument index for AUTO_INDEXED/MANUAL_INDEXED
        text: Emitted text for LITERAL/PASSTHROUGH
    """

    kind: PlaceholderKind
    location: SourceLocation
    index: Optional[int] = None
    text: Optional[str] = None


Segment = Union[str, Placeholder]


def parse_index(body: str) -> Optional[int]:
    """
    Return the integer value of a placeholder body, or None if it is not an integer literal.

    Literals too long to be a real index are clamped to +/- sys.maxsize so
    they are reported as out of range without a huge int conversion.
    """
    if _INDEX_RE.fullmatch(body) is None:
        return None
    negative = body[0] == "-"
    digits = body.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_INDEX_DIGITS:
        return -sys.maxsize if negative else sys.maxsize
    return int(body)


class TemplateFormatter:
    """
    Single-pass expander for brace templates.

    Usage:
        formatter = TemplateFormatter("{}-{}")
        formatter.format(ArgumentList.of(1, 2))  # "1-2"
        formatter.parse()  # ["", Placeholder(...), "-", Placeholder(...)]
    """

    def __init__(self, template: str) -> None:
        """
        Initialize the formatter with a template.

        Args:
            template: The template to expand
        """
        self.template = template
        self.pos = 0
        self._style = NumberingStyle.UNSET
        self._auto_index = 0

    def _reset(self) -> None:
        self.pos = 0
        self._style = NumberingStyle.UNSET
        self._auto_index = 0

    @property
    def _current_char(self) -> Optional[str]:
        """Return the current character or None if at end."""
        if self.pos >= len(self.template):
            return None
        return self.template[self.pos]

    @property
    def _peek_char(self) -> Optional[str]:
        """Return the next character without consuming it."""
        peek_pos = self.pos + 1
        if peek_pos >= len(self.template):
            return None
        return self.template[peek_pos]

    def _location(self) -> SourceLocation:
        return SourceLocation(offset=self.pos)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.template[self.pos]
        self.pos += 1
        return char

    def _lock_style(self, style: NumberingStyle, location: SourceLocation) -> None:
        """Lock the template to a numbering style, rejecting a switch."""
        if self._style is NumberingStyle.UNSET:
            self._style = style
            return
        if self._style is not style:
            if style is NumberingStyle.MANUAL:
                message = "Cannot switch from automatic field numbering to manual field specification"
            else:
                message = "Cannot switch from manual field specification to automatic field numbering"
            raise StyleConflictError(message, location, self.template)

    def _read_literal_run(self) -> str:
        """Consume characters up to the next brace."""
        start = self.pos
        while self._current_char is not None and self._current_char not in "{}":
            self._advance()
        return self.template[start:self.pos]

    def _read_placeholder(self) -> Placeholder:
        """
        Read a placeholder starting at the current '{' or '}'.

        A non-numeric body is passed through and does not lock a numbering style.
        """
        start_loc = self._location()

        if self._current_char == "}":
            if self._peek_char == "}":
                self._advance()
                self._advance()
                return Placeholder(PlaceholderKind.LITERAL, start_loc, text="}")
            raise StrayClosingBraceError(
                "Single '}' encountered in format string", start_loc, self.template
            )

        if self._peek_char == "{":
            self._advance()
            self._advance()
            return Placeholder(PlaceholderKind.LITERAL, start_loc, text="{")

        self._advance()  # consume '{'
        body_start = self.pos
        while self._current_char is not None and self._current_char != "}":
            self._advance()
        if self._current_char is None:
            raise UnterminatedPlaceholderError(
                "Expected '}' before end of string", start_loc, self.template
            )
        body = self.template[body_start:self.pos]
        self._advance()  # consume '}'

        if not body:
            self._lock_style(NumberingStyle.AUTO, start_loc)
            index = self._auto_index
            self._auto_index += 1
            return Placeholder(PlaceholderKind.AUTO_INDEXED, start_loc, index=index)

        index = parse_index(body)
        if index is None:
            return Placeholder(PlaceholderKind.PASSTHROUGH, start_loc, text="{" + body + "}")

        self._lock_style(NumberingStyle.MANUAL, start_loc)
        return Placeholder(PlaceholderKind.MANUAL_INDEXED, start_loc, index=index)

    def _segments(self) -> Iterator[Segment]:
        """Yield literal runs and placeholders in template order."""
        self._reset()
        while self._current_char is not None:
            if self._current_char in "{}":
                yield self._read_placeholder()
            else:
                yield self._read_literal_run()

    def parse(self) -> list[Segment]:
        """
        Parse the template without substituting anything.

        Returns:
            Literal runs (str) and Placeholder objects in template order

        Raises:
            StyleConflictError, UnterminatedPlaceholderError, StrayClosingBraceError
        """
        return list(self._segments())

    def format(self, args: ArgumentList) -> str:
        """
        Expand the template with the given arguments.

        Raises:
            FormatError: On the first malformed placeholder or bad index
        """
        parts: list[str] = []
        for segment in self._segments():
            if isinstance(segment, str):
                parts.append(segment)
            elif segment.index is not None:
                parts.append(args.text_at(segment.index, segment.location, self.template))
            else:
                parts.append(segment.text or "")
        return "".join(parts)


def sformat(template: str, *args: Any) -> str:
    """
    Expand a brace template with positional arguments.

    Example:
        sformat("{}-{}", 1, 2) -> "1-2"
        sformat("{1}-{0}", 1, 2) -> "2-1"
    """
    return TemplateFormatter(template).format(ArgumentList(args))


def try_sformat(template: str, *args: Any) -> Result[str, FormatError]:
    """Expand a brace template, returning Ok(text) or Err(FormatError)."""
    try:
        return Ok(sformat(template, *args))
    except FormatError as e:
        return Err(e)


def printf(fmt: str, *args: Any) -> str:
    """
    printf-style formatting (%d, %s, %.2f, ...).

    Raises:
        PrintfFormatError: If the format and arguments do not match
    """
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as e:
        raise PrintfFormatError(f"Invalid printf format {fmt!r}: {e}") from e
