import pytest

from inputforge.rand import SeededSource
from inputforge.synth import generate_label, label, linux_hostname
from inputforge.utils.errors import GrammarError, LengthError, RangeError, ValidationError
from inputforge.validate import validate_label, validate_linux_hostname


def test_generated_labels_round_trip() -> None:
    source = SeededSource(11)
    for _ in range(2000):
        value = label(source)
        assert 1 <= len(value) <= 63
        validate_label(value)


def test_exact_length() -> None:
    source = SeededSource(3)
    for length in range(1, 64):
        value = label(source, length, length)
        assert len(value) == length
        validate_label(value, length, length)


def test_generate_label_rejects_bad_length() -> None:
    with pytest.raises(ValueError):
        generate_label(SeededSource(0), 64)


def test_label_bounds() -> None:
    with pytest.raises(RangeError):
        label(SeededSource(0), 10, 64)
    with pytest.raises(RangeError):
        validate_label("abc", 5, 4)


def test_validate_label_collects_every_defect() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_label("-Ab_", 5, 10)
    err = excinfo.value
    assert err.has(LengthError)
    messages = str(err)
    assert "invalid characters" in messages
    assert "must not start with a hyphen" in messages
    assert len(err.errors) == 3


def test_validate_label_hyphen_edges() -> None:
    with pytest.raises(ValidationError, match="must not start with a hyphen"):
        validate_label("-ab")
    with pytest.raises(ValidationError, match="must not end with a hyphen"):
        validate_label("ab-")
    validate_label("a-b")
    validate_label("7")


def test_linux_hostname() -> None:
    source = SeededSource(5)
    for _ in range(1000):
        value = linux_hostname(source)
        assert 1 <= len(value) <= 64
        assert value[0].islower()
        validate_linux_hostname(value)
    assert len(linux_hostname(source, 64, 64)) == 64


def test_validate_linux_hostname_rejects_leading_digit() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_linux_hostname("1host")
    assert excinfo.value.has(GrammarError)
    assert "lowercase letter" in str(excinfo.value)
