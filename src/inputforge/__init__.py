"""Generate and validate structured strings with exact length control.

The package builds domain names, e-mail addresses, passwords and
passphrases whose length lies in a requested range and whose grammar holds
by construction, and ships validators that check the same grammar.  All
randomness flows through an explicit :class:`~inputforge.rand.RandomSource`
so output is either replayable (:class:`~inputforge.rand.SeededSource`) or
cryptographically strong (:class:`~inputforge.rand.SystemSource`).
"""

from .bounds import LengthBound, resolve_bounds
from .corpus import BadPasswordCorpus, is_bad_password
from .policy import PASSWORD_POLICIES, PasswordPolicy
from .rand import RandomSource, SeededSource, SystemSource
from .synth import Generator
from .utils.errors import (
    BadPasswordError,
    CorpusLoadError,
    FeasibilityError,
    GrammarError,
    InputForgeError,
    LengthError,
    RangeError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "BadPasswordCorpus",
    "BadPasswordError",
    "CorpusLoadError",
    "FeasibilityError",
    "Generator",
    "GrammarError",
    "InputForgeError",
    "LengthBound",
    "LengthError",
    "PASSWORD_POLICIES",
    "PasswordPolicy",
    "RandomSource",
    "RangeError",
    "SeededSource",
    "SystemSource",
    "ValidationError",
    "is_bad_password",
    "resolve_bounds",
    "__version__",
]
