import string

import pytest

from inputforge.policy import (
    DATABASE,
    LINUX_WORKSTATION_USER,
    MARIADB,
    PASSWORD_POLICIES,
    SERVICE_ACCOUNT,
    SSH_KEY,
    TLS_CA_KEY,
    PasswordPolicy,
    get_policy,
)
from inputforge.rand import SeededSource
from inputforge.synth import password_for
from inputforge.utils.errors import RangeError
from inputforge.validate import validate_password_for


def test_named_policy_table() -> None:
    assert len(PASSWORD_POLICIES) == 11
    assert (TLS_CA_KEY.min_length, TLS_CA_KEY.max_length) == (20, 255)
    assert TLS_CA_KEY.require_special
    assert not SSH_KEY.require_special
    assert (MARIADB.min_length, MARIADB.max_length) == (20, 31)
    assert (SERVICE_ACCOUNT.min_length, SERVICE_ACCOUNT.max_length) == (32, 64)
    assert (DATABASE.min_length, DATABASE.max_length) == (24, 64)
    assert LINUX_WORKSTATION_USER.required_classes == (
        string.ascii_lowercase,
        string.digits,
    )


def test_get_policy_is_case_insensitive() -> None:
    assert get_policy("MariaDB") is MARIADB
    assert get_policy("service-account") is SERVICE_ACCOUNT
    with pytest.raises(KeyError, match="unknown password policy"):
        get_policy("nope")


@pytest.mark.parametrize("name", sorted(PASSWORD_POLICIES))
def test_every_named_policy_round_trips(name: str) -> None:
    policy = PASSWORD_POLICIES[name]
    source = SeededSource(len(name))
    for _ in range(50):
        value = password_for(source, policy)
        assert policy.min_length <= len(value) <= policy.max_length
        validate_password_for(value, policy)


def test_policy_defaults() -> None:
    policy = PasswordPolicy()
    assert policy.required_classes == (string.ascii_lowercase,)
    assert policy.system_min_length == 1
    assert not policy.has_requirements
    bound = policy.bounds()
    assert (bound.min, bound.max) == (1, 4096)


def test_policy_rejects_impossible_bounds() -> None:
    with pytest.raises(RangeError):
        PasswordPolicy(2, 10, True, True, True)
    with pytest.raises(RangeError):
        PasswordPolicy(10, 5000)
    with pytest.raises(RangeError):
        PasswordPolicy(10, 9)
