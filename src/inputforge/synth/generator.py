"""Façade binding one randomness source to every synthesis operation.

A :class:`Generator` owns a single :class:`~inputforge.rand.source.RandomSource`
and forwards to the module-level generators, so a caller never mixes the
seeded and system disciplines by accident.  Two seeded generators built
from the same seed produce identical output for identical call sequences.
"""

from __future__ import annotations

from collections.abc import Iterable

from inputforge.config import ConfigModel
from inputforge.corpus import BadPasswordCorpus
from inputforge.data.words import WordList, default_word_list
from inputforge.policy import PasswordPolicy
from inputforge.rand.seed import source_from_config
from inputforge.rand.source import RandomSource, SeededSource, SystemSource

from . import domain as _domain
from . import email as _email
from . import label as _label
from . import passphrase as _passphrase
from . import password as _password


class Generator:
    """Generate domains, e-mail addresses, passwords and passphrases."""

    def __init__(self, source: RandomSource, *, word_list: WordList | None = None) -> None:
        """Bind ``source``; ``word_list`` replaces the packaged default list."""

        self.source: RandomSource = source
        self.word_list: WordList | None = word_list

    @classmethod
    def seeded(cls, seed: int) -> Generator:
        return cls(SeededSource(seed))

    @classmethod
    def system(cls) -> Generator:
        return cls(SystemSource())

    @classmethod
    def from_config(cls, cfg: ConfigModel, *, key: str = "default") -> Generator:
        """Build a generator from ``cfg.randomness`` and ``cfg.words``."""

        return cls(source_from_config(cfg, key=key), word_list=default_word_list(cfg))

    def __repr__(self) -> str:
        return f"Generator({self.source!r})"

    def _words(self, word_list: WordList | Iterable[str] | None) -> WordList | Iterable[str] | None:
        return word_list if word_list is not None else self.word_list

    # -- Names ------------------------------------------------------------

    def label(self, min_length: int = 0, max_length: int = 0) -> str:
        return _label.label(self.source, min_length, max_length)

    def linux_hostname(self, min_length: int = 0, max_length: int = 0) -> str:
        return _label.linux_hostname(self.source, min_length, max_length)

    def domain(self, min_length: int = 0, max_length: int = 0) -> str:
        return _domain.domain(self.source, min_length, max_length)

    def domain_with_valid_tld(self, min_length: int = 0, max_length: int = 0) -> str:
        return _domain.domain_with_valid_tld(self.source, min_length, max_length)

    def domain_with_valid_cctld(self, min_length: int = 0, max_length: int = 0) -> str:
        return _domain.domain_with_valid_cctld(self.source, min_length, max_length)

    def tld(self, min_length: int = 0, max_length: int = 0) -> str:
        return _domain.tld(self.source, min_length, max_length)

    def cctld(self) -> str:
        return _domain.cctld(self.source)

    def email(
        self,
        min_length: int = 0,
        max_length: int = 0,
        *,
        quoted_local_part: bool = False,
        ip_domain_part: bool = False,
    ) -> str:
        return _email.email(
            self.source,
            min_length,
            max_length,
            quoted_local_part=quoted_local_part,
            ip_domain_part=ip_domain_part,
        )

    # -- Credentials ------------------------------------------------------

    def password(
        self,
        min_length: int = 0,
        max_length: int = 0,
        *,
        lower: bool = False,
        upper: bool = False,
        digit: bool = False,
        special: bool = False,
    ) -> str:
        return _password.password(
            self.source,
            min_length,
            max_length,
            lower=lower,
            upper=upper,
            digit=digit,
            special=special,
        )

    def password_for(
        self, policy: PasswordPolicy, *, corpus: BadPasswordCorpus | None = None
    ) -> str:
        return _password.password_for(self.source, policy, corpus=corpus)

    def passphrase(
        self,
        min_words: int = 0,
        max_words: int = 0,
        *,
        separator: str = "-",
        capitalize: bool = False,
        append_digit: bool = False,
        word_list: WordList | Iterable[str] | None = None,
    ) -> str:
        return _passphrase.passphrase(
            self.source,
            min_words,
            max_words,
            separator=separator,
            capitalize=capitalize,
            append_digit=append_digit,
            word_list=self._words(word_list),
        )

    def username(
        self,
        *,
        capitalize: bool = False,
        append_digits: bool = True,
        word_list: WordList | Iterable[str] | None = None,
    ) -> str:
        return _passphrase.username(
            self.source,
            capitalize=capitalize,
            append_digits=append_digits,
            word_list=self._words(word_list),
        )


__all__ = ["Generator"]
