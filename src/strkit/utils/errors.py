"""
Error types and template location tracking for strkit.
"""

from dataclasses import dataclass
from typing import Optional


class ErrorCode:
    """
    Centralized catalog of strkit error codes.

    Error codes are organized by category:
    - F01xx: Template formatter errors
    - F02xx: printf-style formatter errors
    - T01xx: Transliteration errors
    """

    # Template formatter: F01xx
    F0101 = "F0101"  # style conflict
    F0102 = "F0102"  # index out of range
    F0103 = "F0103"  # unterminated placeholder
    F0104 = "F0104"  # stray closing brace

    # printf formatter: F02xx
    F0201 = "F0201"  # bad printf format

    # Transliteration: T01xx
    T0101 = "T0101"  # malformed mapping


ERROR_DESCRIPTIONS: dict[str, str] = {
    ErrorCode.F0101: "cannot mix automatic and manual field numbering",
    ErrorCode.F0102: "replacement index out of range",
    ErrorCode.F0103: "unterminated placeholder",
    ErrorCode.F0104: "single '}' encountered in format string",
    ErrorCode.F0201: "invalid printf-style format",
    ErrorCode.T0101: "malformed translation mapping",
}


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a position inside a template string.

    Attributes:
        offset: 0-indexed character offset from start of template
        column: 1-indexed column (offset + 1 for single-line templates)
    """

    offset: int
    column: int = 0

    def __post_init__(self) -> None:
        if self.column == 0:
            object.__setattr__(self, "column", self.offset + 1)

    def __str__(self) -> str:
        return f"col {self.column}"


class StrKitError(Exception):
    """Base exception for all strkit errors."""

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.code:
            parts.append(f"[{self.code}]")

        if self.location:
            parts.append(f"[{self.location}]")

        parts.append(self.message)

        text = " ".join(parts)
        if self.source_line is not None and self.location:
            # Caret under the offending column
            padding = " " * (4 + self.location.column - 1)
            text += f"\n    {self.source_line}\n{padding}^"
        return text


class FormatError(StrKitError, ValueError):
    """Raised when a template cannot be expanded. No partial output is produced."""

    pass


class StyleConflictError(FormatError):
    """Raised when automatic and manual field numbering are mixed in one template."""

    code = ErrorCode.F0101


class IndexOutOfRangeError(FormatError, IndexError):
    """Raised when a placeholder refers past the end of the argument list."""

    code = ErrorCode.F0102

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        index: Optional[int] = None,
        arg_count: Optional[int] = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            message: Error message
            location: Position of the placeholder in the template
            source_line: The template text
            index: The requested argument index
            arg_count: Number of arguments that were supplied
        """
        self.index = index
        self.arg_count = arg_count
        super().__init__(message, location, source_line)


class UnterminatedPlaceholderError(FormatError):
    """Raised when a '{' is never closed by a '}'."""

    code = ErrorCode.F0103


class StrayClosingBraceError(FormatError):
    """Raised when a single '}' appears outside any placeholder."""

    code = ErrorCode.F0104


class PrintfFormatError(FormatError):
    """Raised when a printf-style format does not match its arguments."""

    code = ErrorCode.F0201


class MalformedMappingError(StrKitError, ValueError):
    """
    Raised when a translation table cannot be built.

    This error is raised when:
    - The from/to character sets differ in length
    - Either set is longer than the table allows
    - Either set contains a repeated character
    """

    code = ErrorCode.T0101


# Short names matching the error taxonomy
StyleConflict = StyleConflictError
IndexOutOfRange = IndexOutOfRangeError
UnterminatedPlaceholder = UnterminatedPlaceholderError
StrayClosingBrace = StrayClosingBraceError
MalformedMapping = MalformedMappingError
