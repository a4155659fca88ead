from __future__ import annotations

import random

import pytest

from inputforge.data import WordList, ag_words, eff_long_words
from inputforge.rand import SeededSource, SystemSource
from inputforge.synth import check_separator, passphrase, username
from inputforge.utils.errors import (
    FeasibilityError,
    GrammarError,
    LengthError,
    RangeError,
    ValidationError,
)
from inputforge.validate import validate_passphrase

SMALL = WordList(["apple", "banana", "cherry", "damson"], name="fruit")


def test_default_word_count_and_membership() -> None:
    source = SeededSource(1)
    for _ in range(200):
        value = passphrase(source)
        words = value.split("-")
        assert 2 <= len(words) <= 128
        assert all(word in ag_words() for word in words)
        validate_passphrase(value)


def test_round_trip_random_options() -> None:
    params = random.Random(5)
    for source in (SeededSource(5), SystemSource()):
        for _ in range(500):
            lo = params.randint(2, 12)
            hi = params.randint(lo, 12)
            options = {
                "separator": params.choice(["-", "_", "::", "/", "7"]),
                "capitalize": params.random() < 0.5,
                "append_digit": params.random() < 0.5,
                "word_list": params.choice([None, ag_words(), eff_long_words(), SMALL]),
            }
            value = passphrase(source, lo, hi, **options)
            validate_passphrase(value, lo, hi, **options)


def test_capitalize_and_digit() -> None:
    source = SeededSource(3)
    for _ in range(100):
        value = passphrase(
            source, 3, 3, separator=".", capitalize=True, append_digit=True, word_list=SMALL
        )
        words = value.split(".")
        assert len(words) == 3
        assert all(word[0].isupper() for word in words)
        assert sum(word[-1].isdigit() for word in words) == 1


def test_digit_avoids_separator_characters() -> None:
    source = SeededSource(4)
    separator = "012345678"
    for _ in range(50):
        value = passphrase(source, 2, 2, separator=separator, append_digit=True, word_list=SMALL)
        assert value[-1] == "9" or value.split(separator)[0][-1] == "9"


def test_separator_rules() -> None:
    with pytest.raises(GrammarError, match="empty"):
        passphrase(SeededSource(0), separator="")
    with pytest.raises(GrammarError, match="whitespace"):
        passphrase(SeededSource(0), separator=" ")
    with pytest.raises(GrammarError, match="shares characters"):
        passphrase(SeededSource(0), separator="a", word_list=SMALL)
    with pytest.raises(GrammarError, match="shares characters"):
        check_separator("B", SMALL)  # capitalized initial of "banana"
    with pytest.raises(FeasibilityError):
        passphrase(SeededSource(0), separator="-0123456789", append_digit=True)


def test_word_count_bounds() -> None:
    with pytest.raises(RangeError):
        passphrase(SeededSource(0), 1, 5)
    with pytest.raises(RangeError):
        passphrase(SeededSource(0), 2, 129)
    with pytest.raises(RangeError):
        passphrase(SeededSource(0), 6, 5)


def test_plain_iterable_word_list() -> None:
    value = passphrase(SeededSource(2), 4, 4, word_list=["one", "two"])
    assert set(value.split("-")) <= {"one", "two"}


def test_validator_defects() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_passphrase("apple-kiwi", 3, 5, word_list=SMALL)
    err = excinfo.value
    assert err.has(LengthError)
    assert "word 2 'kiwi' is not in the word list" in str(err)

    with pytest.raises(ValidationError, match="not capitalized"):
        validate_passphrase("Apple-banana", capitalize=True, word_list=SMALL)
    with pytest.raises(ValidationError, match="exactly one word must end with a digit"):
        validate_passphrase("apple1-banana2", append_digit=True, word_list=SMALL)
    with pytest.raises(ValidationError, match="found 0"):
        validate_passphrase("apple-banana", append_digit=True, word_list=SMALL)
    with pytest.raises(ValidationError, match="word 2 is empty"):
        validate_passphrase("apple--banana", word_list=SMALL)
    validate_passphrase("Apple-Banana3", capitalize=True, append_digit=True, word_list=SMALL)


def test_username() -> None:
    source = SeededSource(8)
    for _ in range(100):
        value = username(source, word_list=SMALL)
        word, digits = value[:-4], value[-4:]
        assert word in SMALL
        assert digits.isdigit()
    assert username(source, capitalize=True, append_digits=False, word_list=SMALL) in {
        "Apple",
        "Banana",
        "Cherry",
        "Damson",
    }
    assert username(SeededSource(1)) == username(SeededSource(1))


@pytest.mark.parametrize(
    "word_list,capitalize,append_digit",
    [
        (["alpha1", "beta"], False, True),
        (["alpha1", "beta"], True, True),
        (["alpha", "alpha1", "alpha12"], False, True),
        (["1password", "Alpha"], True, False),
        (["1password", "Alpha", "gamma"], True, True),
    ],
)
def test_round_trip_unusual_word_lists(
    word_list: list[str], capitalize: bool, append_digit: bool
) -> None:
    source = SeededSource(9)
    for _ in range(300):
        value = passphrase(
            source, 2, 6, capitalize=capitalize, append_digit=append_digit, word_list=word_list
        )
        validate_passphrase(
            value, 2, 6, capitalize=capitalize, append_digit=append_digit, word_list=word_list
        )


def test_validator_matches_words_ending_in_digits() -> None:
    words = ["alpha1", "beta"]
    validate_passphrase("alpha1-beta", word_list=words)
    validate_passphrase("alpha1-beta", append_digit=True, word_list=words)
    validate_passphrase("alpha1-beta7", append_digit=True, word_list=words)
    validate_passphrase("alpha13-alpha1", append_digit=True, word_list=words)
    with pytest.raises(ValidationError, match="found 2"):
        validate_passphrase("alpha13-beta7", append_digit=True, word_list=words)
    with pytest.raises(ValidationError, match="found 0"):
        validate_passphrase("beta-beta", append_digit=True, word_list=words)


def test_validator_capitalized_word_lists() -> None:
    words = ["1password", "Alpha"]
    validate_passphrase("1password-Alpha", capitalize=True, word_list=words)
    with pytest.raises(ValidationError, match="word 2 'alpha' is not in the word list"):
        validate_passphrase("1password-alpha", capitalize=True, word_list=words)
