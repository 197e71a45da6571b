"""
strkit - A text transformation toolkit.

strkit provides string splitting on delimiter sets or patterns, first/last/all
replacement, one-to-one character transliteration, and a brace template
formatter with strict rules about mixing automatic and manual field numbering.
"""

__version__ = "0.1.0"

from strkit.engine import (
    ArgKind,
    Argument,
    ArgumentList,
    Placeholder,
    PlaceholderKind,
    ReplaceMode,
    TemplateFormatter,
    TranslationTable,
    join,
    maketrans,
    printf,
    regex_replace,
    regex_replace_first,
    regex_replace_last,
    regex_split,
    replace,
    replace_first,
    replace_last,
    sformat,
    split,
    try_sformat,
)
from strkit.utils.errors import FormatError, MalformedMappingError, StrKitError

__all__ = [
    "sformat",
    "try_sformat",
    "printf",
    "TemplateFormatter",
    "Placeholder",
    "PlaceholderKind",
    "ArgKind",
    "Argument",
    "ArgumentList",
    "split",
    "regex_split",
    "join",
    "ReplaceMode",
    "replace",
    "replace_first",
    "replace_last",
    "regex_replace",
    "regex_replace_first",
    "regex_replace_last",
    "TranslationTable",
    "maketrans",
    "StrKitError",
    "FormatError",
    "MalformedMappingError",
]
