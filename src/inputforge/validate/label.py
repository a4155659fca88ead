"""Validators for DNS labels and Linux hostnames."""

from __future__ import annotations

from inputforge.bounds import check_measured_length, resolve_bounds
from inputforge.synth.label import (
    MAX_HOSTNAME_LENGTH,
    MAX_LABEL_LENGTH,
    MIN_HOSTNAME_LENGTH,
    MIN_LABEL_LENGTH,
)
from inputforge.utils.constants import LABEL_INTERIOR, LOWER, LOWER_ALNUM
from inputforge.utils.errors import GrammarError, InputForgeError, raise_collected

__all__ = ["label_grammar_errors", "validate_label", "validate_linux_hostname"]


def label_grammar_errors(
    text: str, *, first_alphabet: str = LOWER_ALNUM, what: str = "label"
) -> list[InputForgeError]:
    """Return every grammar defect of a single label without checking its length."""

    if not text:
        return [GrammarError(f"{what} is empty")]

    errors: list[InputForgeError] = []
    invalid = sorted({ch for ch in text if ch not in LABEL_INTERIOR})
    if invalid:
        errors.append(
            GrammarError(f"{what} contains invalid characters {''.join(invalid)!r}")
        )
    if text[0] not in first_alphabet and text[0] in LABEL_INTERIOR:
        if first_alphabet == LOWER:
            errors.append(GrammarError(f"{what} must start with a lowercase letter"))
        else:
            errors.append(GrammarError(f"{what} must not start with a hyphen"))
    if len(text) > 1 and text[-1] == "-":
        errors.append(GrammarError(f"{what} must not end with a hyphen"))
    return errors


def validate_label(value: str, min_length: int = 0, max_length: int = 0) -> None:
    """Raise :class:`~inputforge.utils.errors.ValidationError` for an invalid label."""

    bound = resolve_bounds(min_length, max_length, MIN_LABEL_LENGTH, MAX_LABEL_LENGTH)
    errors: list[InputForgeError] = []
    length_error = check_measured_length(len(value), bound, what="label")
    if length_error is not None:
        errors.append(length_error)
    errors.extend(label_grammar_errors(value))
    raise_collected(errors)


def validate_linux_hostname(value: str, min_length: int = 0, max_length: int = 0) -> None:
    """Raise for a hostname that is not a single lowercase label starting with a letter."""

    bound = resolve_bounds(min_length, max_length, MIN_HOSTNAME_LENGTH, MAX_HOSTNAME_LENGTH)
    errors: list[InputForgeError] = []
    length_error = check_measured_length(len(value), bound, what="hostname")
    if length_error is not None:
        errors.append(length_error)
    errors.extend(label_grammar_errors(value, first_alphabet=LOWER, what="hostname"))
    raise_collected(errors)
