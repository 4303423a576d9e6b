"""
Randomness source: the only place that touches the OS random generator.

Each draw reads one unsigned 32-bit value from os.urandom and reduces it
modulo the requested bound. The reduction carries a modulo bias of at most
max_exclusive / 2**32, which for the bounds used here (<= 100) is below
2.4e-8 and is accepted as a known approximation.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, MutableSequence, Sequence, TypeVar

from .config import SecureHexError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_WORD_BYTES = 4


class RandomnessUnavailable(SecureHexError):
    """The secure random source could not be read."""


class SecureRandomSource:
    """
    Bounded integers, choices and shuffles drawn from a secure byte reader.

    The reader defaults to os.urandom. Tests may inject a deterministic
    reader; production code must not.
    """

    def __init__(self, read_bytes: Callable[[int], bytes] | None = None) -> None:
        self._read_bytes = read_bytes or os.urandom

    def _next_word(self) -> int:
        try:
            data = self._read_bytes(_WORD_BYTES)
        except (NotImplementedError, OSError) as exc:
            raise RandomnessUnavailable(
                f"Secure random source is unavailable: {exc}"
            ) from exc

        if len(data) != _WORD_BYTES:
            raise RandomnessUnavailable(
                f"Secure random source returned {len(data)} bytes, "
                f"expected {_WORD_BYTES}."
            )
        return int.from_bytes(data, "big")

    def randbelow(self, max_exclusive: int) -> int:
        """
        Return a random integer in [0, max_exclusive).
        """
        if isinstance(max_exclusive, bool) or not isinstance(max_exclusive, int):
            raise ValueError(f"max_exclusive must be an int, got {max_exclusive!r}")
        if max_exclusive <= 0:
            raise ValueError(f"max_exclusive must be positive, got {max_exclusive}")
        return self._next_word() % max_exclusive

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """
        In-place Fisher-Yates shuffle.
        """
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]


DEFAULT_SOURCE = SecureRandomSource()


def secure_random_int(max_exclusive: int) -> int:
    """
    Return a uniformly random integer in [0, max_exclusive) from the OS CSPRNG.

    Raises RandomnessUnavailable if the OS source cannot be read; there is
    no fallback to a non-secure generator.
    """
    return DEFAULT_SOURCE.randbelow(max_exclusive)
