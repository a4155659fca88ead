"""Password complexity policies.

A :class:`PasswordPolicy` bundles a length range with the four
character-class requirements so that callers never pass four positional
booleans.  The named presets below mirror common deployment targets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .bounds import LengthBound, resolve_bounds
from .utils.constants import DIGITS, LOWER, SPECIAL, UPPER

__all__ = [
    "MAX_PASSWORD_LENGTH",
    "PasswordPolicy",
    "TLS_CA_KEY",
    "SSH_CA_KEY",
    "TLS_KEY",
    "SSH_KEY",
    "LINUX_SERVER_USER",
    "LINUX_WORKSTATION_USER",
    "WINDOWS_SERVER_USER",
    "WINDOWS_DESKTOP_USER",
    "MARIADB",
    "SERVICE_ACCOUNT",
    "DATABASE",
    "PASSWORD_POLICIES",
    "get_policy",
]

MAX_PASSWORD_LENGTH: Final = 4096


@dataclass(slots=True, frozen=True)
class PasswordPolicy:
    """Length range and required character classes for a password.

    ``min_length``/``max_length`` of ``0``/``0`` mean "unset" and resolve to
    the system range.  The effective minimum is the number of required
    classes, or ``1`` when none is required; in that case passwords are drawn
    from lowercase letters only.
    """

    min_length: int = 0
    max_length: int = 0
    require_lower: bool = False
    require_upper: bool = False
    require_digit: bool = False
    require_special: bool = False

    def __post_init__(self) -> None:
        # Raises RangeError for bounds that can never be satisfied.
        self.bounds()

    @property
    def has_requirements(self) -> bool:
        return (
            self.require_lower or self.require_upper or self.require_digit or self.require_special
        )

    @property
    def required_classes(self) -> tuple[str, ...]:
        """Character classes of which at least one member must appear."""

        classes = tuple(
            chars
            for flag, chars in (
                (self.require_lower, LOWER),
                (self.require_upper, UPPER),
                (self.require_digit, DIGITS),
                (self.require_special, SPECIAL),
            )
            if flag
        )
        return classes or (LOWER,)

    @property
    def charset(self) -> str:
        """Union of the required classes; generation draws from it uniformly."""

        return "".join(self.required_classes)

    @property
    def system_min_length(self) -> int:
        return len(self.required_classes)

    def bounds(self) -> LengthBound:
        """Return the resolved length bound of this policy."""

        return resolve_bounds(
            self.min_length, self.max_length, self.system_min_length, MAX_PASSWORD_LENGTH
        )


def _all_classes(min_length: int, max_length: int) -> PasswordPolicy:
    return PasswordPolicy(min_length, max_length, True, True, True, True)


def _no_special(min_length: int, max_length: int) -> PasswordPolicy:
    return PasswordPolicy(min_length, max_length, True, True, True, False)


TLS_CA_KEY: Final = _all_classes(20, 255)
SSH_CA_KEY: Final = _all_classes(20, 255)
TLS_KEY: Final = _all_classes(20, 127)
SSH_KEY: Final = _no_special(20, 127)
LINUX_SERVER_USER: Final = _no_special(20, 63)
LINUX_WORKSTATION_USER: Final = PasswordPolicy(10, 20, require_lower=True, require_digit=True)
WINDOWS_SERVER_USER: Final = _no_special(20, 63)
WINDOWS_DESKTOP_USER: Final = PasswordPolicy(10, 20, require_lower=True, require_digit=True)
MARIADB: Final = _no_special(20, 31)
SERVICE_ACCOUNT: Final = _all_classes(32, 64)
DATABASE: Final = _no_special(24, 64)

PASSWORD_POLICIES: Final[dict[str, PasswordPolicy]] = {
    "tls_ca_key": TLS_CA_KEY,
    "ssh_ca_key": SSH_CA_KEY,
    "tls_key": TLS_KEY,
    "ssh_key": SSH_KEY,
    "linux_server_user": LINUX_SERVER_USER,
    "linux_workstation_user": LINUX_WORKSTATION_USER,
    "windows_server_user": WINDOWS_SERVER_USER,
    "windows_desktop_user": WINDOWS_DESKTOP_USER,
    "mariadb": MARIADB,
    "service_account": SERVICE_ACCOUNT,
    "database": DATABASE,
}


def get_policy(name: str) -> PasswordPolicy:
    """Return the preset registered under ``name`` (case-insensitive)."""

    key = name.strip().lower().replace("-", "_")
    try:
        return PASSWORD_POLICIES[key]
    except KeyError:
        known = ", ".join(sorted(PASSWORD_POLICIES))
        raise KeyError(f"unknown password policy {name!r}; known policies: {known}") from None
