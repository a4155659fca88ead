"""Validators mirroring every generator.

Each validator resolves the requested bounds first (raising
:class:`~inputforge.utils.errors.RangeError` for impossible requests), then
collects every independent defect of the value and raises them together as
one :class:`~inputforge.utils.errors.ValidationError`.  A valid value
returns ``None``.
"""

from .domain import (
    validate_cctld,
    validate_domain,
    validate_domain_with_valid_cctld,
    validate_domain_with_valid_tld,
    validate_tld,
)
from .email import validate_email
from .label import validate_label, validate_linux_hostname
from .passphrase import validate_passphrase
from .password import validate_password, validate_password_for

__all__ = [
    "validate_cctld",
    "validate_domain",
    "validate_domain_with_valid_cctld",
    "validate_domain_with_valid_tld",
    "validate_email",
    "validate_label",
    "validate_linux_hostname",
    "validate_passphrase",
    "validate_password",
    "validate_password_for",
    "validate_tld",
]
