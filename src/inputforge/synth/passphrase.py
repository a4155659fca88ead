"""Passphrase and username synthesis from word lists.

When no word list is given the packaged default is used.  The bundled lists
are abridged (956 words for ``ag``, 2460 for ``eff``, against roughly 18k and
7.7k in the full lists), so each word contributes about 9.9 or 11.3 bits of
entropy instead of about 14.1 or 12.9.  Point ``words.ag_path`` or
``words.eff_path`` at a full list, or pass one as ``word_list``, when that
matters.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from inputforge.bounds import resolve_bounds
from inputforge.data.words import WordList, coerce_word_list
from inputforge.rand.source import RandomSource
from inputforge.utils.constants import DIGITS
from inputforge.utils.errors import FeasibilityError, GrammarError

__all__ = [
    "MIN_PASSPHRASE_WORDS",
    "MAX_PASSPHRASE_WORDS",
    "USERNAME_DIGITS",
    "check_separator",
    "passphrase",
    "username",
]

MIN_PASSPHRASE_WORDS: Final = 2
MAX_PASSPHRASE_WORDS: Final = 128
USERNAME_DIGITS: Final = 4


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def check_separator(separator: str, words: WordList, *, append_digit: bool = False) -> None:
    """Raise when ``separator`` could not be split back out of a passphrase.

    The separator must be non-empty, contain no whitespace and share no
    character with the words (capitalized initials included).  When a digit
    is appended, at least one digit must remain that the separator does not
    use.
    """

    if not separator:
        raise GrammarError("separator must not be empty")
    if any(ch.isspace() for ch in separator):
        raise GrammarError("separator must not contain whitespace")
    shared = sorted(set(separator) & words.alphabet)
    if shared:
        raise GrammarError(
            f"separator shares characters {''.join(shared)!r} with the word list"
        )
    if append_digit and set(DIGITS) <= set(separator):
        raise FeasibilityError("separator uses every digit; no digit is left to append")


def passphrase(
    source: RandomSource,
    min_words: int = 0,
    max_words: int = 0,
    *,
    separator: str = "-",
    capitalize: bool = False,
    append_digit: bool = False,
    word_list: WordList | Iterable[str] | None = None,
) -> str:
    """Return ``n`` words drawn with replacement and joined by ``separator``.

    ``n`` is drawn uniformly from the resolved word-count bound (``[2, 128]``
    when unset).  With ``append_digit`` one randomly chosen word receives a
    trailing digit that does not occur in ``separator``.
    ``word_list`` defaults to the abridged packaged list; see the module notes.
    """

    bound = resolve_bounds(min_words, max_words, MIN_PASSPHRASE_WORDS, MAX_PASSPHRASE_WORDS)
    words = coerce_word_list(word_list)
    check_separator(separator, words, append_digit=append_digit)

    count = source.between(bound.min, bound.max)
    chosen = [source.choice(words.words) for _ in range(count)]
    if capitalize:
        chosen = [_capitalize(word) for word in chosen]

    if append_digit:
        index = source.next_below(count)
        digit = source.choice(DIGITS)
        while digit in separator:
            digit = source.choice(DIGITS)
        chosen[index] += digit

    return separator.join(chosen)


def username(
    source: RandomSource,
    *,
    capitalize: bool = False,
    append_digits: bool = True,
    word_list: WordList | Iterable[str] | None = None,
) -> str:
    """Return one dictionary word, optionally capitalized, with a 4-digit suffix."""

    words = coerce_word_list(word_list)
    word = source.choice(words.words)
    if capitalize:
        word = _capitalize(word)
    if append_digits:
        word += "".join(source.choice(DIGITS) for _ in range(USERNAME_DIGITS))
    return word
