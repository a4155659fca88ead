import pytest

from inputforge.utils.errors import (
    BadPasswordError,
    CorpusLoadError,
    FeasibilityError,
    GrammarError,
    InputForgeError,
    LengthError,
    RangeError,
    ValidationError,
    raise_collected,
)


def test_hierarchy() -> None:
    assert issubclass(FeasibilityError, RangeError)
    assert issubclass(RangeError, ValueError)
    assert issubclass(LengthError, GrammarError)
    assert issubclass(BadPasswordError, GrammarError)
    assert issubclass(CorpusLoadError, OSError)
    for kind in (RangeError, GrammarError, CorpusLoadError, ValidationError):
        assert issubclass(kind, InputForgeError)


def test_validation_error_collects_messages() -> None:
    err = ValidationError([LengthError("too long"), GrammarError("bad char")])
    assert str(err) == "too long\nbad char"
    assert err.has(LengthError) and err.has(GrammarError)
    assert not err.has(BadPasswordError)


def test_raise_collected() -> None:
    raise_collected([])
    with pytest.raises(ValidationError) as excinfo:
        raise_collected([GrammarError("x")])
    assert len(excinfo.value.errors) == 1
