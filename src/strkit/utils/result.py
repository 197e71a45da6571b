"""
Result values for operations whose failures are caller-input driven.

A Result is either Ok(value) or Err(error). Callers that prefer not to use
exceptions can branch on ``is_ok()`` or use ``unwrap_or``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying the error that would have been raised."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default):
        return default


Result = Union[Ok[T], Err[E]]
