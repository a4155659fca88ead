"""Validators for domain names and top-level domains.

Domain validation mirrors the builder: the name is split on ``.``, every
label must satisfy the label grammar, ``www`` may only be the first label
and the total length must lie in the resolved bounds.  Every defect found
is reported, each prefixed with the position of the offending label.
"""

from __future__ import annotations

from inputforge.bounds import LengthBound, check_measured_length, resolve_bounds
from inputforge.data.tables import cctlds, generic_tlds
from inputforge.synth.domain import (
    CCTLD_LENGTH,
    MAX_DOMAIN_LENGTH,
    MIN_DOMAIN_LENGTH,
    MIN_TLD_LENGTH,
)
from inputforge.synth.label import MAX_LABEL_LENGTH
from inputforge.utils.errors import (
    GrammarError,
    InputForgeError,
    LengthError,
    raise_collected,
)

from .label import label_grammar_errors

__all__ = [
    "domain_errors",
    "validate_domain",
    "validate_domain_with_valid_tld",
    "validate_domain_with_valid_cctld",
    "validate_tld",
    "validate_cctld",
]


def domain_errors(
    value: str, bound: LengthBound, *, what: str = "domain"
) -> list[InputForgeError]:
    """Return every defect of ``value`` as a domain name within ``bound``."""

    errors: list[InputForgeError] = []
    length_error = check_measured_length(len(value), bound, what=what)
    if length_error is not None:
        errors.append(length_error)

    for position, text in enumerate(value.split("."), start=1):
        prefix = f"{what} label {position}"
        if len(text) > MAX_LABEL_LENGTH:
            errors.append(
                LengthError(
                    f"{prefix} length of {len(text)} exceeds maximum length of "
                    f"{MAX_LABEL_LENGTH} characters"
                )
            )
        if text == "www" and position > 1:
            errors.append(GrammarError(f"{prefix} is 'www', which may only be the first label"))
        errors.extend(label_grammar_errors(text, what=prefix))
    return errors


def validate_domain(value: str, min_length: int = 0, max_length: int = 0) -> None:
    """Raise :class:`~inputforge.utils.errors.ValidationError` for an invalid domain."""

    bound = resolve_bounds(min_length, max_length, MIN_DOMAIN_LENGTH, MAX_DOMAIN_LENGTH)
    raise_collected(domain_errors(value, bound))


def _terminal_errors(value: str, table: frozenset[str], kind: str) -> list[InputForgeError]:
    head, dot, top = value.rpartition(".")
    if not dot or not head:
        return [GrammarError(f"domain must have at least one label before the {kind}")]
    if top not in table:
        return [GrammarError(f"{top!r} is not a known {kind}")]
    return []


def validate_domain_with_valid_tld(value: str, min_length: int = 0, max_length: int = 0) -> None:
    """Like :func:`validate_domain` and the last label must be a delegated TLD."""

    bound = resolve_bounds(min_length, max_length, MIN_TLD_LENGTH + 2, MAX_DOMAIN_LENGTH)
    errors = domain_errors(value, bound)
    errors.extend(_terminal_errors(value, generic_tlds(), "TLD"))
    raise_collected(errors)


def validate_domain_with_valid_cctld(
    value: str, min_length: int = 0, max_length: int = 0
) -> None:
    """Like :func:`validate_domain` and the last label must be a country-code TLD."""

    bound = resolve_bounds(min_length, max_length, CCTLD_LENGTH + 2, MAX_DOMAIN_LENGTH)
    errors = domain_errors(value, bound)
    errors.extend(_terminal_errors(value, frozenset(cctlds()), "country-code TLD"))
    raise_collected(errors)


def validate_tld(value: str) -> None:
    if value not in generic_tlds():
        raise_collected([GrammarError(f"{value!r} is not a known TLD")])


def validate_cctld(value: str) -> None:
    if value not in cctlds():
        raise_collected([GrammarError(f"{value!r} is not a known country-code TLD")])
