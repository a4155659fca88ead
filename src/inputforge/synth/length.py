"""Uniform length selection for every generator."""

from __future__ import annotations

from inputforge.bounds import resolve_bounds
from inputforge.rand.source import RandomSource

__all__ = ["select_length"]


def select_length(
    source: RandomSource, req_min: int, req_max: int, sys_min: int, sys_max: int
) -> int:
    """Validate the requested pair and return one length drawn uniformly from it.

    Bounds are checked before any randomness is consumed, so a
    :class:`~inputforge.utils.errors.RangeError` leaves ``source`` untouched.
    """

    bound = resolve_bounds(req_min, req_max, sys_min, sys_max)
    return source.between(bound.min, bound.max)
