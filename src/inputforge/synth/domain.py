"""Exact-length domain name construction.

Building a domain of an exact length is a bin-packing problem: labels are 1 to
63 characters wide, each label after the first costs one extra character for
its separating dot and the whole name may not exceed 253 characters.

:func:`domain` appends random labels while tracking the running length:

- landing exactly on the target ends construction;
- landing one character short of the target cannot be closed by appending a
  label (that costs at least two characters), so the last label is regrown by
  one character, or, when it is already 63 characters wide, shortened by one
  and followed by a one-character label;
- overshooting the target truncates the last label by the overflow.

Truncation never leaves a trailing hyphen; a hyphen exposed at the end is
replaced with a fresh lowercase alphanumeric.  The literal ``www`` is only
allowed inside the first label; later candidates containing it are redrawn.
"""

from __future__ import annotations

from typing import Final

from inputforge.bounds import resolve_bounds
from inputforge.data import cctlds, tlds_by_length
from inputforge.rand.source import RandomSource
from inputforge.utils.constants import LOWER_ALNUM
from inputforge.utils.errors import RangeError
from inputforge.utils.logging import get_logger

from .label import MAX_LABEL_LENGTH, MIN_LABEL_LENGTH, generate_label
from .length import select_length

__all__ = [
    "MIN_DOMAIN_LENGTH",
    "MAX_DOMAIN_LENGTH",
    "MIN_TLD_LENGTH",
    "MAX_TLD_LENGTH",
    "CCTLD_LENGTH",
    "domain",
    "domain_with_valid_tld",
    "domain_with_valid_cctld",
    "tld",
    "cctld",
]

logger = get_logger(__name__)

MIN_DOMAIN_LENGTH: Final = 1
MAX_DOMAIN_LENGTH: Final = 253
MIN_TLD_LENGTH: Final = 2
MAX_TLD_LENGTH: Final = 15
CCTLD_LENGTH: Final = 2

_RESERVED_LABEL: Final = "www"


# ---------------------------------------------------------------------------
# Label helpers
# ---------------------------------------------------------------------------


def _draw_label(source: RandomSource, lo: int, hi: int, *, first: bool) -> str:
    """Draw a label of length in ``[lo, hi]``, redrawing ``www`` after position 0."""

    while True:
        candidate = generate_label(source, source.between(lo, hi))
        if first or _RESERVED_LABEL not in candidate:
            return candidate


def _close_hyphen(source: RandomSource, text: str, *, first: bool) -> str:
    if not text.endswith("-"):
        return text
    while True:
        fixed = text[:-1] + source.choice(LOWER_ALNUM)
        if first or _RESERVED_LABEL not in fixed:
            return fixed


def _pack_labels(source: RandomSource, length: int) -> list[str]:
    labels: list[str] = []
    track = 0
    while True:
        first = not labels
        candidate = _draw_label(source, MIN_LABEL_LENGTH, MAX_LABEL_LENGTH, first=first)
        size = len(candidate)
        labels.append(candidate)
        track += size

        if track == length - 1:
            if size == MAX_LABEL_LENGTH:
                labels[-1] = _close_hyphen(source, candidate[:-1], first=first)
                labels.append(_draw_label(source, 1, 1, first=False))
            else:
                labels[-1] = _draw_label(source, size + 1, size + 1, first=first)
            return labels

        if track >= length:
            labels[-1] = _close_hyphen(
                source, candidate[: size - (track - length)], first=first
            )
            return labels

        track += 1  # separator before the next label


# ---------------------------------------------------------------------------
# Public generators
# ---------------------------------------------------------------------------


def domain(source: RandomSource, min_length: int = 0, max_length: int = 0) -> str:
    """Return a domain name whose length lies in the requested bounds."""

    length = select_length(source, min_length, max_length, MIN_DOMAIN_LENGTH, MAX_DOMAIN_LENGTH)
    labels = _pack_labels(source, length)
    logger.debug("packed %d labels into %d characters", len(labels), length)
    return ".".join(labels)


def tld(source: RandomSource, min_length: int = 0, max_length: int = 0) -> str:
    """Return a delegated generic TLD whose length lies in the requested bounds.

    Only lengths that occur in the reference table are eligible, each with
    equal probability.
    """

    bound = resolve_bounds(min_length, max_length, MIN_TLD_LENGTH, MAX_TLD_LENGTH)
    table = tlds_by_length()
    lengths = [n for n in range(bound.min, bound.max + 1) if table.get(n)]
    if not lengths:
        raise RangeError(f"no TLD has a length between {bound.min} and {bound.max}")
    return source.choice(table[source.choice(lengths)])


def cctld(source: RandomSource) -> str:
    """Return a delegated two-letter country-code TLD."""

    return source.choice(cctlds())


def domain_with_valid_tld(source: RandomSource, min_length: int = 0, max_length: int = 0) -> str:
    """Return a domain name terminated by a real generic TLD."""

    length = select_length(
        source, min_length, max_length, MIN_TLD_LENGTH + 2, MAX_DOMAIN_LENGTH
    )
    max_tld = min(MAX_TLD_LENGTH, length - MIN_DOMAIN_LENGTH - 1)
    top = tld(source, MIN_TLD_LENGTH, max_tld)
    rest = length - len(top) - 1
    return f"{domain(source, rest, rest)}.{top}"


def domain_with_valid_cctld(
    source: RandomSource, min_length: int = 0, max_length: int = 0
) -> str:
    """Return a domain name terminated by a real country-code TLD."""

    length = select_length(source, min_length, max_length, CCTLD_LENGTH + 2, MAX_DOMAIN_LENGTH)
    top = cctld(source)
    rest = length - CCTLD_LENGTH - 1
    return f"{domain(source, rest, rest)}.{top}"
