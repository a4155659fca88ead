"""Randomness sources consumed by every generator.

Generators never call :mod:`random` or :mod:`secrets` directly; they receive a
:class:`RandomSource` and draw from it.  Two adapters are provided:

``SeededSource``
    Deterministic and replayable.  Two instances created with the same seed
    yield identical streams, so identical call sequences produce
    byte-identical output.

``SystemSource``
    Backed by the operating system CSPRNG via :class:`secrets.SystemRandom`.
    There is no replay guarantee; use it for real credentials.

A single generator call only ever draws from the source it was given, so the
two disciplines are never mixed within one value.
"""

from __future__ import annotations

import random
import secrets
from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

__all__ = ["RandomSource", "SeededSource", "SystemSource"]

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Capability producing uniform random integers."""

    def next_u64(self) -> int:
        """Return a uniform integer in ``[0, 2**64)``."""

        ...

    def next_below(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``; ``n`` must be positive."""

        ...

    def between(self, lo: int, hi: int) -> int:
        """Return a uniform integer in the inclusive range ``[lo, hi]``."""

        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty ``seq``."""

        ...


class _RandomAdapter:
    """Shared implementation over a :class:`random.Random` compatible engine."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def next_u64(self) -> int:
        return self._rng.getrandbits(64)

    def next_below(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        return self._rng.randrange(n)

    def between(self, lo: int, hi: int) -> int:
        if hi < lo:
            raise ValueError("hi must not be less than lo")
        return lo + self.next_below(hi - lo + 1)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("cannot choose from an empty sequence")
        return seq[self.next_below(len(seq))]


class SeededSource(_RandomAdapter):
    """Deterministic source seeded with an integer."""

    __slots__ = ("seed",)

    def __init__(self, seed: int) -> None:
        super().__init__(random.Random(seed))
        self.seed = seed

    def __repr__(self) -> str:
        return f"SeededSource(seed={self.seed!r})"


class SystemSource(_RandomAdapter):
    """Cryptographically strong, non-replayable source."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(secrets.SystemRandom())

    def __repr__(self) -> str:
        return "SystemSource()"
