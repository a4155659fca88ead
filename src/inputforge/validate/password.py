"""Password validators."""

from __future__ import annotations

from inputforge.bounds import check_measured_length
from inputforge.corpus import BadPasswordCorpus
from inputforge.policy import PasswordPolicy
from inputforge.utils.constants import DIGITS, LOWER, SPECIAL, UPPER
from inputforge.utils.errors import (
    BadPasswordError,
    GrammarError,
    InputForgeError,
    raise_collected,
)

__all__ = ["validate_password", "validate_password_for"]

_CLASS_NAMES = {
    LOWER: "lowercase letter",
    UPPER: "uppercase letter",
    DIGITS: "digit",
    SPECIAL: "special character",
}


def validate_password_for(
    value: str, policy: PasswordPolicy, *, corpus: BadPasswordCorpus | None = None
) -> None:
    """Raise :class:`~inputforge.utils.errors.ValidationError` unless ``value`` meets ``policy``.

    Any character outside printable ASCII (space included) is rejected.  When
    ``corpus`` is given a hit is reported as
    :class:`~inputforge.utils.errors.BadPasswordError`; a corpus that cannot
    be loaded raises :class:`~inputforge.utils.errors.CorpusLoadError`.
    """

    errors: list[InputForgeError] = []
    length_error = check_measured_length(len(value), policy.bounds(), what="password")
    if length_error is not None:
        errors.append(length_error)

    if any(not 32 <= ord(ch) <= 126 for ch in value):
        errors.append(GrammarError("password contains a non-printable ASCII character"))

    # With no class required nothing is enforced beyond printable ASCII.
    if policy.has_requirements:
        for chars in policy.required_classes:
            if not any(ch in chars for ch in value):
                errors.append(
                    GrammarError(f"password must contain at least one {_CLASS_NAMES[chars]}")
                )

    if corpus is not None and corpus.is_bad(value):
        errors.append(BadPasswordError("password is in the list of common bad passwords"))

    raise_collected(errors)


def validate_password(
    value: str,
    min_length: int = 0,
    max_length: int = 0,
    *,
    lower: bool = False,
    upper: bool = False,
    digit: bool = False,
    special: bool = False,
    corpus: BadPasswordCorpus | None = None,
) -> None:
    """Validate ``value`` against explicit bounds and class requirements."""

    policy = PasswordPolicy(
        min_length,
        max_length,
        require_lower=lower,
        require_upper=upper,
        require_digit=digit,
        require_special=special,
    )
    validate_password_for(value, policy, corpus=corpus)
