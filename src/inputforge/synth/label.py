"""DNS label and Linux hostname generators.

A label is built position by position: the first character is drawn from the
lowercase alphanumerics, the interior from lowercase alphanumerics plus ``-``
and the last (when the label is longer than one character) from the lowercase
alphanumerics again.  The grammar is therefore satisfied by construction and
no retry is ever needed.
"""

from __future__ import annotations

from typing import Final

from inputforge.rand.source import RandomSource
from inputforge.utils.constants import LABEL_INTERIOR, LOWER, LOWER_ALNUM

from .length import select_length

__all__ = [
    "MIN_LABEL_LENGTH",
    "MAX_LABEL_LENGTH",
    "MIN_HOSTNAME_LENGTH",
    "MAX_HOSTNAME_LENGTH",
    "generate_label",
    "label",
    "linux_hostname",
]

MIN_LABEL_LENGTH: Final = 1
MAX_LABEL_LENGTH: Final = 63
MIN_HOSTNAME_LENGTH: Final = 1
MAX_HOSTNAME_LENGTH: Final = 64


def _build(source: RandomSource, length: int, first_alphabet: str) -> str:
    chars = [source.choice(first_alphabet)]
    chars.extend(source.choice(LABEL_INTERIOR) for _ in range(length - 2))
    if length > 1:
        chars.append(source.choice(LOWER_ALNUM))
    return "".join(chars)


def generate_label(source: RandomSource, length: int) -> str:
    """Return one label of exactly ``length`` characters."""

    if not MIN_LABEL_LENGTH <= length <= MAX_LABEL_LENGTH:
        raise ValueError(f"label length must be between 1 and 63, got {length}")
    return _build(source, length, LOWER_ALNUM)


def label(source: RandomSource, min_length: int = 0, max_length: int = 0) -> str:
    """Return one label with a length drawn from the requested bounds."""

    length = select_length(source, min_length, max_length, MIN_LABEL_LENGTH, MAX_LABEL_LENGTH)
    return generate_label(source, length)


def linux_hostname(source: RandomSource, min_length: int = 0, max_length: int = 0) -> str:
    """Return a single-label hostname that starts with a lowercase letter."""

    length = select_length(
        source, min_length, max_length, MIN_HOSTNAME_LENGTH, MAX_HOSTNAME_LENGTH
    )
    return _build(source, length, LOWER)
