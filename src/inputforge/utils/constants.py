"""Shared character tables for generators and validators."""

from __future__ import annotations

import string
from typing import Final

__all__ = [
    "DIGITS",
    "LOWER",
    "UPPER",
    "SPECIAL",
    "LOWER_ALNUM",
    "ALNUM",
    "LABEL_INTERIOR",
    "PRINTABLE",
    "UNQUOTED_SPECIALS",
    "UNQUOTED_EDGE",
    "UNQUOTED_INTERIOR",
    "QUOTED_INTERIOR",
]

DIGITS: Final = string.digits
LOWER: Final = string.ascii_lowercase
UPPER: Final = string.ascii_uppercase
# All 32 ASCII punctuation characters, double quote and backslash included.
SPECIAL: Final = string.punctuation
LOWER_ALNUM: Final = LOWER + DIGITS
ALNUM: Final = LOWER + UPPER + DIGITS
LABEL_INTERIOR: Final = LOWER_ALNUM + "-"
# Printable ASCII without space: 94 characters.
PRINTABLE: Final = ALNUM + SPECIAL

UNQUOTED_SPECIALS: Final = "!#$%&'*+-/=?^_`{|}~"
UNQUOTED_EDGE: Final = ALNUM + UNQUOTED_SPECIALS
UNQUOTED_INTERIOR: Final = UNQUOTED_EDGE + "."
QUOTED_INTERIOR: Final = PRINTABLE + " "
