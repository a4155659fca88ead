import pytest

from inputforge.bounds import LengthBound, check_measured_length, resolve_bounds
from inputforge.utils.errors import LengthError, RangeError


def test_unset_pair_uses_system_bounds() -> None:
    bound = resolve_bounds(0, 0, 1, 253)
    assert bound == LengthBound(1, 253)


def test_explicit_pair_within_system_bounds() -> None:
    bound = resolve_bounds(10, 20, 1, 253)
    assert (bound.min, bound.max) == (10, 20)
    assert 10 in bound and 20 in bound
    assert 9 not in bound and 21 not in bound


def test_max_below_min_rejected() -> None:
    with pytest.raises(RangeError, match="can not be less than"):
        resolve_bounds(10, 5, 1, 253)


def test_min_below_system_minimum() -> None:
    with pytest.raises(RangeError, match="must not be less than 4"):
        resolve_bounds(2, 10, 4, 253)


def test_both_limits_reported_together() -> None:
    with pytest.raises(RangeError) as excinfo:
        resolve_bounds(2, 300, 4, 253)
    message = str(excinfo.value)
    assert "less than 4" in message
    assert "exceed 253" in message


def test_range_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        resolve_bounds(300, 300, 1, 253)


def test_length_bound_rejects_inverted_interval() -> None:
    with pytest.raises(RangeError):
        LengthBound(5, 4)


def test_check_measured_length() -> None:
    bound = LengthBound(3, 5)
    assert check_measured_length(4, bound, what="label") is None
    short = check_measured_length(2, bound, what="label")
    assert isinstance(short, LengthError)
    assert "less than minimum length of 3 characters" in str(short)
    long = check_measured_length(6, bound, what="passphrase", units="words")
    assert isinstance(long, LengthError)
    assert "exceeds maximum length of 5 words" in str(long)
