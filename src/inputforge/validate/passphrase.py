"""Passphrase validator."""

from __future__ import annotations

from collections.abc import Iterable

from inputforge.bounds import check_measured_length, resolve_bounds
from inputforge.data.words import WordList, coerce_word_list
from inputforge.synth.passphrase import (
    MAX_PASSPHRASE_WORDS,
    MIN_PASSPHRASE_WORDS,
    check_separator,
)
from inputforge.utils.constants import DIGITS
from inputforge.utils.errors import GrammarError, InputForgeError, raise_collected

__all__ = ["validate_passphrase"]


def validate_passphrase(
    value: str,
    min_words: int = 0,
    max_words: int = 0,
    *,
    separator: str = "-",
    capitalize: bool = False,
    append_digit: bool = False,
    word_list: WordList | Iterable[str] | None = None,
) -> None:
    """Raise :class:`~inputforge.utils.errors.ValidationError` for an invalid passphrase.

    ``value`` is split on ``separator`` and the word count must lie in the
    resolved bound.  Every part must be a word of ``word_list`` (the packaged
    default list when ``None``), capitalized when ``capitalize`` is set.  With
    ``append_digit`` exactly one part must be such a word followed by one
    digit.  Parts are matched against the list as written and without their
    last digit, so words that themselves end in a digit or start with a
    character that has no upper case round-trip.

    An unusable ``separator`` raises :class:`~inputforge.utils.errors.GrammarError`
    directly, like an invalid bound raises
    :class:`~inputforge.utils.errors.RangeError`.
    """

    bound = resolve_bounds(min_words, max_words, MIN_PASSPHRASE_WORDS, MAX_PASSPHRASE_WORDS)
    words = coerce_word_list(word_list)
    check_separator(separator, words, append_digit=append_digit)

    errors: list[InputForgeError] = []
    parts = value.split(separator)
    count_error = check_measured_length(len(parts), bound, what="passphrase", units="words")
    if count_error is not None:
        errors.append(count_error)

    forms = words.capitalized if capitalize else words
    # Positions whose part only matches with the trailing digit removed, and
    # positions that may carry the digit but also match without it.
    needs_digit: list[int] = []
    may_have_digit: list[int] = []
    for position, part in enumerate(parts, start=1):
        if not part:
            errors.append(GrammarError(f"word {position} is empty"))
            continue
        as_written = part in forms
        stripped = part[:-1] if append_digit and part[-1] in DIGITS else ""
        with_digit = bool(stripped) and stripped in forms
        if as_written:
            if with_digit:
                may_have_digit.append(position)
            continue
        if with_digit:
            needs_digit.append(position)
            continue
        word = stripped or part
        if capitalize and word in words:
            errors.append(GrammarError(f"word {position} {word!r} is not capitalized"))
        else:
            errors.append(GrammarError(f"word {position} {word!r} is not in the word list"))

    if append_digit and (len(needs_digit) > 1 or not (needs_digit or may_have_digit)):
        errors.append(
            GrammarError(f"exactly one word must end with a digit, found {len(needs_digit)}")
        )

    raise_collected(errors)
