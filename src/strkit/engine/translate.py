"""
strkit Transliteration Table.

Maps characters one-to-one from a ``from`` set onto a ``to`` set of the
same length. Characters outside the ``from`` set pass through unchanged.

Tables whose characters all fall in the 8-bit range are stored as a
256-entry numpy lookup array and applied with vectorized indexing. Wider
tables fall back to a sparse dict for ``str.translate``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from strkit.utils.errors import MalformedMappingError

logger = logging.getLogger(__name__)

TABLE_SIZE = 256

CharSet = Union[str, bytes]


def _code_points(chars: CharSet) -> list[int]:
    if isinstance(chars, bytes):
        return list(chars)
    return [ord(c) for c in chars]


class TranslationTable:
    """
    One-to-one character mapping.

    Usage:
        table = TranslationTable("el", "ip")
        table.apply("hello")  # "hippo"
    """

    def __init__(self, from_chars: CharSet, to_chars: CharSet) -> None:
        """
        Build the table.

        Raises:
            MalformedMappingError: If the sets differ in length, exceed
                TABLE_SIZE characters, or contain a repeated character
        """
        sources = _code_points(from_chars)
        targets = _code_points(to_chars)

        if len(sources) != len(targets):
            raise MalformedMappingError(
                f"from and to must be the same length ({len(sources)} != {len(targets)})"
            )
        if len(sources) > TABLE_SIZE:
            raise MalformedMappingError(
                f"at most {TABLE_SIZE} characters can be mapped, got {len(sources)}"
            )
        if len(set(sources)) != len(sources):
            raise MalformedMappingError("from contains a repeated character")
        if len(set(targets)) != len(targets):
            raise MalformedMappingError("to contains a repeated character")

        self.mapping: dict[int, int] = dict(zip(sources, targets))
        self.is_byte_table = all(cp < TABLE_SIZE for cp in (*sources, *targets))

        self._lookup: Optional[np.ndarray] = None
        if self.is_byte_table:
            lookup = np.arange(TABLE_SIZE, dtype=np.uint8)
            if self.mapping:
                lookup[list(self.mapping)] = list(self.mapping.values())
            self._lookup = lookup

    @classmethod
    def try_build(cls, from_chars: CharSet, to_chars: CharSet) -> Optional[TranslationTable]:
        """Build a table, or return None if the mapping is malformed."""
        try:
            return cls(from_chars, to_chars)
        except MalformedMappingError as e:
            logger.debug("translation table not built: %s", e)
            return None

    def __len__(self) -> int:
        return len(self.mapping)

    def __getitem__(self, char: str) -> str:
        """Return the mapped character (identity for unmapped characters)."""
        return chr(self.mapping.get(ord(char), ord(char)))

    def _apply_bytes(self, data: bytes) -> bytes:
        if self._lookup is None:
            raise TypeError("Cannot apply a table with characters above U+00FF to bytes")
        codes = np.frombuffer(data, dtype=np.uint8)
        return self._lookup[codes].tobytes()

    def _apply_text(self, text: str) -> str:
        if self._lookup is not None and text.isascii():
            codes = np.frombuffer(text.encode("ascii"), dtype=np.uint8)
            return self._lookup[codes].tobytes().decode("latin-1")
        return text.translate(self.mapping)

    def apply(self, s: CharSet) -> CharSet:
        """Translate every character of s in one pass."""
        if not self.mapping or not s:
            return s
        if isinstance(s, bytes):
            return self._apply_bytes(s)
        return self._apply_text(s)


def maketrans(s: CharSet, from_chars: CharSet, to_chars: CharSet) -> CharSet:
    """
    Translate s through the from -> to mapping.

    A malformed mapping leaves s unchanged instead of raising.

    Example:
        maketrans("hello", "el", "ip") -> "hippo"
        maketrans("hello", "ab", "aa") -> "hello"
    """
    table = TranslationTable.try_build(from_chars, to_chars)
    if table is None:
        return s
    return table.apply(s)
