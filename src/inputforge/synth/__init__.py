"""Structured-string generators.

Every function takes a :class:`~inputforge.rand.source.RandomSource` as its
first argument; :class:`Generator` binds one source for convenience.
"""

# Imported first: generator binds the submodules before the function
# imports below shadow them as package attributes.
from .generator import Generator  # noqa: I001
from .domain import cctld, domain, domain_with_valid_cctld, domain_with_valid_tld, tld
from .email import email, email_length_limits, ip_literal_window
from .label import generate_label, label, linux_hostname
from .length import select_length
from .passphrase import check_separator, passphrase, username
from .password import password, password_for

__all__ = [
    "Generator",
    "cctld",
    "check_separator",
    "domain",
    "domain_with_valid_cctld",
    "domain_with_valid_tld",
    "email",
    "email_length_limits",
    "generate_label",
    "ip_literal_window",
    "label",
    "linux_hostname",
    "passphrase",
    "password",
    "password_for",
    "select_length",
    "tld",
    "username",
]
