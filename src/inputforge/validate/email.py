"""E-mail address validator.

The address is split on its last ``@``.  With an unquoted local part any
earlier ``@`` is reported as an invalid character; a quoted local part may
contain ``@``.  Local part and domain part are checked independently and
every defect of both is reported together.
"""

from __future__ import annotations

import ipaddress

from inputforge.bounds import LengthBound, check_measured_length, resolve_bounds
from inputforge.synth.domain import MAX_DOMAIN_LENGTH, MIN_DOMAIN_LENGTH
from inputforge.synth.email import (
    MAX_LOCAL_LENGTH,
    MIN_LOCAL_LENGTH,
    MIN_QUOTED_LOCAL_LENGTH,
    email_length_limits,
)
from inputforge.utils.constants import QUOTED_INTERIOR, UNQUOTED_INTERIOR
from inputforge.utils.errors import GrammarError, InputForgeError, raise_collected

from .domain import domain_errors

__all__ = ["validate_email"]

_IPV6_PREFIX = "IPv6:"


def _unquoted_local_errors(local: str) -> list[InputForgeError]:
    if not local:
        # reported as a length error
        return []
    errors: list[InputForgeError] = []
    invalid = sorted({ch for ch in local if ch not in UNQUOTED_INTERIOR})
    if invalid:
        errors.append(
            GrammarError(f"local part contains invalid characters {''.join(invalid)!r}")
        )
    if local.startswith("."):
        errors.append(GrammarError("local part must not start with a dot"))
    if local.endswith("."):
        errors.append(GrammarError("local part must not end with a dot"))
    if ".." in local:
        errors.append(GrammarError("local part must not contain consecutive dots"))
    return errors


def _quoted_local_errors(local: str) -> list[InputForgeError]:
    if len(local) < 2 or not (local.startswith('"') and local.endswith('"')):
        return [GrammarError("quoted local part must begin and end with a double quote")]
    invalid = sorted({ch for ch in local[1:-1] if ch not in QUOTED_INTERIOR})
    if invalid:
        return [
            GrammarError(
                f"quoted local part contains non-printable characters {''.join(invalid)!r}"
            )
        ]
    return []


def _ip_literal_errors(domain_part: str) -> list[InputForgeError]:
    if not (domain_part.startswith("[") and domain_part.endswith("]")):
        return [GrammarError("IP literal domain part must be enclosed in brackets")]
    inner = domain_part[1:-1]
    if "%" in inner:
        # ipaddress accepts zone identifiers; address literals carry none
        return [GrammarError("domain part IP literal must not carry a zone identifier")]
    try:
        if inner.startswith(_IPV6_PREFIX):
            ipaddress.IPv6Address(inner[len(_IPV6_PREFIX) :])
        else:
            ipaddress.IPv4Address(inner)
    except ipaddress.AddressValueError as exc:
        return [GrammarError(f"domain part is not a valid IP literal: {exc}")]
    return []


def validate_email(
    value: str,
    min_length: int = 0,
    max_length: int = 0,
    *,
    quoted_local_part: bool = False,
    ip_domain_part: bool = False,
) -> None:
    """Raise :class:`~inputforge.utils.errors.ValidationError` for an invalid address."""

    sys_lo, sys_hi = email_length_limits(quoted_local_part)
    bound = resolve_bounds(min_length, max_length, sys_lo, sys_hi)

    errors: list[InputForgeError] = []
    length_error = check_measured_length(len(value), bound, what="e-mail")
    if length_error is not None:
        errors.append(length_error)

    local, at, domain_part = value.rpartition("@")
    if not at:
        errors.append(GrammarError("e-mail address must contain '@'"))
        raise_collected(errors)

    min_local = MIN_QUOTED_LOCAL_LENGTH if quoted_local_part else MIN_LOCAL_LENGTH
    local_error = check_measured_length(
        len(local), LengthBound(min_local, MAX_LOCAL_LENGTH), what="local part"
    )
    if local_error is not None:
        errors.append(local_error)
    if quoted_local_part:
        errors.extend(_quoted_local_errors(local))
    else:
        errors.extend(_unquoted_local_errors(local))

    if ip_domain_part:
        errors.extend(_ip_literal_errors(domain_part))
    else:
        domain_bound = LengthBound(MIN_DOMAIN_LENGTH, MAX_DOMAIN_LENGTH)
        errors.extend(domain_errors(domain_part, domain_bound, what="domain part"))

    raise_collected(errors)
