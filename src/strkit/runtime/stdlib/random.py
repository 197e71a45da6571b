"""
strkit Standard Library - Random Module.

Provides random number strings and random character strings drawn from a
single process-wide generator. The generator is created on first use and
every draw holds a lock, so the module is safe to call from several
threads.
"""

from __future__ import annotations

import random as _random
import threading
from collections.abc import Callable
from typing import Optional

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
_BYTE_RANGE = 256

# Global random generator, created lazily
_rng: Optional[_random.Random] = None
_rng_lock = threading.Lock()


def _generator() -> _random.Random:
    """Return the shared generator. Caller must hold _rng_lock."""
    global _rng
    if _rng is None:
        _rng = _random.Random()  # seeded from system entropy
    return _rng


def set_seed(seed: int) -> None:
    """Set random seed for reproducibility."""
    with _rng_lock:
        _generator().seed(seed)


def _randint(a: int, b: int) -> int:
    if a > b:
        raise ValueError(f"minimum {a} is greater than maximum {b}")
    with _rng_lock:
        return _generator().randint(a, b)


def random_number_string(minimum: int = 0, maximum: int = UINT32_MAX) -> str:
    """Return a random integer in [minimum, maximum] as a decimal string."""
    return str(_randint(minimum, maximum))


def random_number_string_64(minimum: int = 0, maximum: int = UINT64_MAX) -> str:
    """Return a random 64-bit range integer in [minimum, maximum] as a decimal string."""
    return str(_randint(minimum, maximum))


def random_alphabet_string(length: int, valid: Callable[[str], bool] = str.isalnum) -> str:
    """
    Return length random characters from the 8-bit range accepted by valid.

    If no 8-bit character is accepted, the result is length NUL characters.
    """
    alphabet = [chr(code) for code in range(_BYTE_RANGE) if valid(chr(code))]
    if not alphabet:
        return "\0" * max(length, 0)
    with _rng_lock:
        rng = _generator()
        return "".join(rng.choice(alphabet) for _ in range(length))
