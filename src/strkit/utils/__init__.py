"""
strkit Utilities Package.

Common utilities for error handling and result values.
"""

from strkit.utils.errors import (
    ERROR_DESCRIPTIONS,
    ErrorCode,
    FormatError,
    IndexOutOfRangeError,
    MalformedMappingError,
    PrintfFormatError,
    SourceLocation,
    StrayClosingBraceError,
    StrKitError,
    StyleConflictError,
    UnterminatedPlaceholderError,
)
from strkit.utils.result import Err, Ok, Result

__all__ = [
    # Errors
    "StrKitError",
    "FormatError",
    "StyleConflictError",
    "IndexOutOfRangeError",
    "UnterminatedPlaceholderError",
    "StrayClosingBraceError",
    "PrintfFormatError",
    "MalformedMappingError",
    "SourceLocation",
    # Error codes
    "ErrorCode",
    "ERROR_DESCRIPTIONS",
    # Results
    "Ok",
    "Err",
    "Result",
]
