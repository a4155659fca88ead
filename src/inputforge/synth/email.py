"""E-mail address assembly on top of the domain builder.

An address is ``local@domain``.  The local part uses one of two grammars:

unquoted
    Alphanumerics and ``!#$%&'*+-/=?^_`{|}~`` with interior dots; it may not
    start or end with a dot and may not contain ``..``.  A candidate with an
    adjacent pair of dots is discarded whole and redrawn, never patched.

quoted
    ``"`` + any printable ASCII or space + ``"``; at least two characters.

The domain part is either a generated domain name or an IP literal.  IP
literals have a small fixed width (``[a.b.c.d]`` is 9 to 17 characters,
``[IPv6:...]`` with a fully expanded address is 46), so they only fit a
narrower window of total lengths; requests outside that window raise
:class:`~inputforge.utils.errors.FeasibilityError` before any randomness is
consumed.
"""

from __future__ import annotations

import ipaddress
from typing import Final

from inputforge.bounds import resolve_bounds
from inputforge.rand.source import RandomSource
from inputforge.utils.constants import QUOTED_INTERIOR, UNQUOTED_EDGE, UNQUOTED_INTERIOR
from inputforge.utils.errors import FeasibilityError

from .domain import MAX_DOMAIN_LENGTH, MIN_DOMAIN_LENGTH, domain
from .length import select_length

__all__ = [
    "MIN_LOCAL_LENGTH",
    "MIN_QUOTED_LOCAL_LENGTH",
    "MAX_LOCAL_LENGTH",
    "MIN_IPV4_LITERAL_LENGTH",
    "MAX_IPV4_LITERAL_LENGTH",
    "IPV6_LITERAL_LENGTH",
    "email_length_limits",
    "ip_literal_window",
    "email",
]

MIN_LOCAL_LENGTH: Final = 1
MIN_QUOTED_LOCAL_LENGTH: Final = 2
MAX_LOCAL_LENGTH: Final = 64
MIN_IPV4_LITERAL_LENGTH: Final = 9  # [0.0.0.0]
MAX_IPV4_LITERAL_LENGTH: Final = 17  # [255.255.255.255]
IPV6_LITERAL_LENGTH: Final = 46  # [IPv6:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx]
_IPV6_PREFIX: Final = "IPv6:"


def _min_local(quoted: bool) -> int:
    return MIN_QUOTED_LOCAL_LENGTH if quoted else MIN_LOCAL_LENGTH


def email_length_limits(quoted_local_part: bool = False) -> tuple[int, int]:
    """Return the system ``(min, max)`` total length for a domain-name address."""

    return (
        _min_local(quoted_local_part) + 1 + MIN_DOMAIN_LENGTH,
        MAX_LOCAL_LENGTH + 1 + MAX_DOMAIN_LENGTH,
    )


def ip_literal_window(quoted_local_part: bool = False) -> tuple[int, int]:
    """Return the feasible ``(min, max)`` total length for an IP-literal address."""

    return (
        _min_local(quoted_local_part) + 1 + MIN_IPV4_LITERAL_LENGTH,
        MAX_LOCAL_LENGTH + 1 + IPV6_LITERAL_LENGTH,
    )


# ---------------------------------------------------------------------------
# Local part
# ---------------------------------------------------------------------------


def _unquoted_local(source: RandomSource, length: int) -> str:
    if length == 1:
        return source.choice(UNQUOTED_EDGE)
    while True:
        chars = [source.choice(UNQUOTED_EDGE)]
        chars.extend(source.choice(UNQUOTED_INTERIOR) for _ in range(length - 2))
        chars.append(source.choice(UNQUOTED_EDGE))
        candidate = "".join(chars)
        if ".." not in candidate:
            return candidate


def _quoted_local(source: RandomSource, length: int) -> str:
    interior = "".join(source.choice(QUOTED_INTERIOR) for _ in range(length - 2))
    return f'"{interior}"'


# ---------------------------------------------------------------------------
# IP literal domain part
# ---------------------------------------------------------------------------


def _octet_widths(source: RandomSource, digits: int) -> list[int]:
    """Split ``digits`` into four octet widths of 1 to 3 digits each."""

    widths: list[int] = []
    remaining = digits
    for slots_left in range(3, -1, -1):
        options = [w for w in (1, 2, 3) if slots_left <= remaining - w <= 3 * slots_left]
        width = source.choice(options)
        widths.append(width)
        remaining -= width
    return widths


def _octet(source: RandomSource, width: int) -> int:
    if width == 1:
        return source.between(0, 9)
    if width == 2:
        return source.between(10, 99)
    return source.between(100, 255)


def _ipv4_literal(source: RandomSource, literal_length: int) -> str:
    digits = literal_length - 2 - 3  # brackets and dots
    octets = [_octet(source, w) for w in _octet_widths(source, digits)]
    return "[" + ".".join(str(o) for o in octets) + "]"


def _ipv6_literal(source: RandomSource) -> str:
    value = (source.next_u64() << 64) | source.next_u64()
    return f"[{_IPV6_PREFIX}{ipaddress.IPv6Address(value).exploded}]"


def _ip_domain_part(source: RandomSource, length: int, min_local: int) -> str:
    lo = length - 1 - MAX_LOCAL_LENGTH
    hi = length - 1 - min_local
    v4_lo = max(lo, MIN_IPV4_LITERAL_LENGTH)
    v4_hi = min(hi, MAX_IPV4_LITERAL_LENGTH)
    families: list[str] = []
    if v4_lo <= v4_hi:
        families.append("v4")
    if lo <= IPV6_LITERAL_LENGTH <= hi:
        families.append("v6")
    if source.choice(families) == "v4":
        return _ipv4_literal(source, source.between(v4_lo, v4_hi))
    return _ipv6_literal(source)


def _resolve_ip_length(
    source: RandomSource, min_length: int, max_length: int, quoted: bool
) -> int:
    lo, hi = ip_literal_window(quoted)
    if min_length == 0 and max_length == 0:
        return source.between(lo, hi)
    sys_lo, sys_hi = email_length_limits(quoted)
    bound = resolve_bounds(min_length, max_length, sys_lo, sys_hi)
    if bound.min < lo or bound.max > hi:
        raise FeasibilityError(
            f"an e-mail with an IP literal domain part needs a length between {lo} and {hi}, "
            f"requested {bound.min} to {bound.max}"
        )
    return source.between(bound.min, bound.max)


# ---------------------------------------------------------------------------
# Public generator
# ---------------------------------------------------------------------------


def email(
    source: RandomSource,
    min_length: int = 0,
    max_length: int = 0,
    *,
    quoted_local_part: bool = False,
    ip_domain_part: bool = False,
) -> str:
    """Return an e-mail address whose length lies in the requested bounds."""

    min_local = _min_local(quoted_local_part)

    if ip_domain_part:
        length = _resolve_ip_length(source, min_length, max_length, quoted_local_part)
        domain_part = _ip_domain_part(source, length, min_local)
        local_length = length - len(domain_part) - 1
    else:
        sys_lo, sys_hi = email_length_limits(quoted_local_part)
        length = select_length(source, min_length, max_length, sys_lo, sys_hi)
        max_local = min(MAX_LOCAL_LENGTH, length - MIN_DOMAIN_LENGTH - 1)
        local_length = source.between(min_local, max_local)
        domain_length = length - local_length - 1
        if domain_length > MAX_DOMAIN_LENGTH:
            domain_length = MAX_DOMAIN_LENGTH
            local_length = length - domain_length - 1
        domain_part = domain(source, domain_length, domain_length)

    if quoted_local_part:
        local_part = _quoted_local(source, local_length)
    else:
        local_part = _unquoted_local(source, local_length)
    return f"{local_part}@{domain_part}"
