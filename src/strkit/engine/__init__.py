"""
strkit Engine Package.

This package contains the core text transformation components:
- Args: Tagged-union arguments for the template formatter
- Formatter: Brace template expansion with numbering-style locking
- Matcher: Pattern matching adapter with $-style replacement references
- Split: Delimiter-set and pattern splitting with an empty-token policy
- Replace: First/last/all replacement for literal and pattern targets
- Translate: One-to-one character transliteration tables
"""

from strkit.engine.args import ArgKind, Argument, ArgumentList
from strkit.engine.formatter import (
    Placeholder,
    PlaceholderKind,
    TemplateFormatter,
    printf,
    sformat,
    try_sformat,
)
from strkit.engine.matcher import PatternMatcher, Span, SubstituteMode, compile_pattern
from strkit.engine.replace import (
    ReplaceMode,
    regex_replace,
    regex_replace_first,
    regex_replace_last,
    replace,
    replace_all,
    replace_first,
    replace_last,
)
from strkit.engine.split import join, regex_split, split, split_exact
from strkit.engine.translate import TranslationTable, maketrans

__all__ = [
    "ArgKind",
    "Argument",
    "ArgumentList",
    "Placeholder",
    "PlaceholderKind",
    "TemplateFormatter",
    "sformat",
    "try_sformat",
    "printf",
    "PatternMatcher",
    "Span",
    "SubstituteMode",
    "compile_pattern",
    "split",
    "split_exact",
    "regex_split",
    "join",
    "ReplaceMode",
    "replace",
    "replace_all",
    "replace_first",
    "replace_last",
    "regex_replace",
    "regex_replace_first",
    "regex_replace_last",
    "TranslationTable",
    "maketrans",
]
