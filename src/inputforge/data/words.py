"""Word lists used for passphrases and usernames.

Two lists ship with the package:

``ag``
    Words of 5 to 10 lowercase letters in the style of the 1Password
    AgileBits list.

``eff``
    Words of 3 to 9 lowercase letters drawn from the EFF long word list.

The bundled files are abridged.  Full-size lists can be supplied through the
``words.ag_path`` / ``words.eff_path`` configuration keys or by passing any
iterable of words to :class:`WordList`.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from functools import lru_cache
from importlib import resources as importlib_resources
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:  # pragma: no cover
    from inputforge.config import ConfigModel

__all__ = [
    "WordList",
    "ag_words",
    "coerce_word_list",
    "default_word_list",
    "eff_long_words",
    "load_word_list",
]

_PACKAGE = "inputforge.data"


class WordList:
    """Immutable, ordered collection of words with fast membership tests."""

    __slots__ = ("words", "_members", "_capitalized", "_alphabet", "name")

    def __init__(self, words: Iterable[str], *, name: str = "custom") -> None:
        cleaned = tuple(w for w in (word.strip() for word in words) if w)
        if not cleaned:
            raise ValueError("word list must contain at least one word")
        self.words: tuple[str, ...] = cleaned
        self._members = frozenset(cleaned)
        self._capitalized = frozenset(word[:1].upper() + word[1:] for word in cleaned)
        alphabet: set[str] = set()
        for word in cleaned:
            alphabet.update(word)
            alphabet.add(word[0].upper())
        self._alphabet = frozenset(alphabet)
        self.name = name

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self._members

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    @property
    def capitalized(self) -> frozenset[str]:
        """Every word with its first character upper-cased."""

        return self._capitalized

    @property
    def alphabet(self) -> frozenset[str]:
        """Every character that can appear in a word, capitalized initials included."""

        return self._alphabet

    def __repr__(self) -> str:
        return f"WordList(name={self.name!r}, size={len(self.words)})"


def _read_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_word_list(path: str | os.PathLike[str], *, name: str | None = None) -> WordList:
    """Load a newline-separated word list from ``path``."""

    p = Path(path)
    return WordList(_read_lines(p.read_text(encoding="utf-8")), name=name or p.stem)


@lru_cache(maxsize=1)
def ag_words() -> WordList:
    """Return the bundled ``ag`` word list."""

    resource = importlib_resources.files(_PACKAGE).joinpath("ag_words.txt")
    text = resource.read_text(encoding="utf-8")
    return WordList(_read_lines(text), name="ag")


@lru_cache(maxsize=1)
def eff_long_words() -> WordList:
    """Return the bundled EFF long word list."""

    resource = importlib_resources.files(_PACKAGE).joinpath("eff_long_words.txt")
    text = resource.read_text(encoding="utf-8")
    return WordList(_read_lines(text), name="eff")


def default_word_list(
    cfg: ConfigModel | None = None, *, which: Literal["ag", "eff"] | None = None
) -> WordList:
    """Return the configured default list, preferring configured file paths."""

    choice = which or (cfg.words.default if cfg is not None else "ag")
    if cfg is not None:
        path = cfg.words.ag_path if choice == "ag" else cfg.words.eff_path
        if path is not None:
            return load_word_list(path, name=choice)
    return ag_words() if choice == "ag" else eff_long_words()


def coerce_word_list(words: WordList | Iterable[str] | None) -> WordList:
    """Return ``words`` as a :class:`WordList`; ``None`` selects the default list."""

    if words is None:
        return default_word_list()
    if isinstance(words, WordList):
        return words
    return WordList(words)
