"""
Positional arguments for the template formatter.

Arguments are a tagged union of integer, float and text values. An
ArgumentList is an ordered, immutable sequence of them indexed from 0.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Union

from strkit.utils.errors import IndexOutOfRangeError, SourceLocation

ArgValue = Union[int, float, str]


class ArgKind(Enum):
    """Variant tag for a formatter argument."""

    INTEGER = auto()
    FLOAT = auto()
    TEXT = auto()


@dataclass(frozen=True, slots=True)
class Argument:
    """
    A single formatter argument.

    Attributes:
        kind: The variant tag
        value: The underlying Python value
    """

    kind: ArgKind
    value: ArgValue

    @classmethod
    def of(cls, value: Any) -> Argument:
        """
        Wrap a Python value, choosing the variant from its type.

        Booleans and None are rejected. Any other object is carried as
        text using its str() form.
        """
        if isinstance(value, Argument):
            return value
        if value is None or isinstance(value, bool):
            raise TypeError(f"Unsupported format argument: {value!r}")
        if isinstance(value, int):
            return cls(ArgKind.INTEGER, value)
        if isinstance(value, float):
            return cls(ArgKind.FLOAT, value)
        if isinstance(value, str):
            return cls(ArgKind.TEXT, value)
        return cls(ArgKind.TEXT, str(value))

    def to_text(self) -> str:
        """Return the canonical text representation of the value."""
        if self.kind is ArgKind.TEXT:
            return self.value  # type: ignore[return-value]
        if self.kind is ArgKind.INTEGER:
            return str(int(self.value))
        return repr(float(self.value))

    def __str__(self) -> str:
        return self.to_text()


class ArgumentList:
    """
    Ordered, fixed-length sequence of formatter arguments.

    Usage:
        args = ArgumentList.of(1, 2.5, "x")
        args.text_at(2)  # "x"
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: tuple[Argument, ...] = tuple(Argument.of(item) for item in items)

    @classmethod
    def of(cls, *values: Any) -> ArgumentList:
        return cls(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Argument:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ArgumentList({', '.join(repr(a.value) for a in self._items)})"

    def text_at(
        self,
        index: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> str:
        """
        Return the text of the argument at index.

        Raises:
            IndexOutOfRangeError: If index is negative or past the end
        """
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRangeError(
                f"Replacement index {index} out of range for {len(self._items)} positional argument(s)",
                location,
                source_line,
                index=index,
                arg_count=len(self._items),
            )
        return self._items[index].to_text()
