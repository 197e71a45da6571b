"""
strkit Standard Library.

Provides the string primitives and random string helpers.
"""

from strkit.runtime.stdlib.string import *
from strkit.runtime.stdlib.random import *

__all__ = [
    # String
    "is_numeric", "ltrim_if", "rtrim_if", "trim_if", "ltrim", "rtrim", "trim",
    "starts_with", "ends_with", "to_upper", "to_lower", "swap_case",
    "is_upper", "is_lower", "mul", "count",
    # Random
    "set_seed", "random_number_string", "random_number_string_64",
    "random_alphabet_string",
]
