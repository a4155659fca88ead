"""Typed exceptions for bound resolution, grammar checks and corpus access."""

from __future__ import annotations

from collections.abc import Iterable


class InputForgeError(Exception):
    """Base class for all errors raised by :mod:`inputforge`."""


class RangeError(InputForgeError, ValueError):
    """Raised when requested bounds fall outside the system bounds or ``max < min``."""


class FeasibilityError(RangeError):
    """Raised when requested bounds cannot be satisfied by a composite format."""


class GrammarError(InputForgeError, ValueError):
    """Raised for a structural violation of a value's grammar."""


class LengthError(GrammarError):
    """Raised when a value's measured length lies outside the resolved bounds."""


class BadPasswordError(GrammarError):
    """Raised when a password is found in the bad-password corpus."""


class CorpusLoadError(InputForgeError, OSError):
    """Raised when the bad-password corpus cannot be read."""


class ValidationError(InputForgeError, ValueError):
    """Aggregate of every independent defect found in a single value.

    ``errors`` keeps the individual exceptions in the order they were found;
    ``str()`` renders one message per line.
    """

    def __init__(self, errors: Iterable[InputForgeError]) -> None:
        self.errors: list[InputForgeError] = list(errors)
        super().__init__("\n".join(str(err) for err in self.errors))

    def has(self, kind: type[InputForgeError]) -> bool:
        """Return ``True`` when any collected error is an instance of ``kind``."""

        return any(isinstance(err, kind) for err in self.errors)


def raise_collected(errors: list[InputForgeError]) -> None:
    """Raise :class:`ValidationError` when ``errors`` is non-empty."""

    if errors:
        raise ValidationError(errors)


__all__ = [
    "InputForgeError",
    "RangeError",
    "FeasibilityError",
    "GrammarError",
    "LengthError",
    "BadPasswordError",
    "CorpusLoadError",
    "ValidationError",
    "raise_collected",
]
