"""Truncated-hash corpus of known bad passwords.

The corpus file is a flat sequence of 5-byte records, each the first five
bytes of the SHA-256 digest of a common password.  Membership is therefore
approximate: a collision may flag an unrelated password (accepted), but a
password present in the source list is always found.

Only passwords whose length lies in the covered band (``[3, 40)`` by
default) are looked up; anything else is reported as not bad without
touching the corpus.  Loading is lazy and happens at most once per
instance.  The first caller takes the write side of an internal lock and
populates the set; every later lookup only takes the read side.  A missing
or damaged file raises :class:`~inputforge.utils.errors.CorpusLoadError`
and never silently reads as "not bad".
"""

from __future__ import annotations

import hashlib
import os
import threading
from functools import lru_cache
from importlib import resources as importlib_resources
from pathlib import Path
from typing import TYPE_CHECKING, Final

from .utils.errors import CorpusLoadError
from .utils.logging import get_logger

if TYPE_CHECKING:
    from .config import ConfigModel

__all__ = [
    "RECORD_SIZE",
    "DEFAULT_MIN_LENGTH",
    "DEFAULT_MAX_LENGTH",
    "BadPasswordCorpus",
    "shared_corpus",
    "is_bad_password",
]

RECORD_SIZE: Final = 5
DEFAULT_MIN_LENGTH: Final = 3
DEFAULT_MAX_LENGTH: Final = 40

logger = get_logger(__name__)


class _ReadWriteLock:
    """Many readers or one writer; writers are not starved by new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writing or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writing = True

    def release_write(self) -> None:
        with self._cond:
            self._writing = False
            self._cond.notify_all()


class BadPasswordCorpus:
    """Set of 5-byte SHA-256 prefixes with lazy, thread-safe loading.

    Parameters
    ----------
    path:
        Corpus file.  ``None`` selects the list bundled with the package.
    min_length, max_length:
        Covered password length band ``[min_length, max_length)``.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        *,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        if min_length < 1 or max_length <= min_length:
            raise ValueError("corpus length band must satisfy 1 <= min_length < max_length")
        self.path = Path(path) if path is not None else None
        self.min_length = min_length
        self.max_length = max_length
        self._lock = _ReadWriteLock()
        self._entries: frozenset[bytes] = frozenset()
        self._loaded = False

    @classmethod
    def from_config(cls, cfg: ConfigModel) -> BadPasswordCorpus:
        settings = cfg.corpus
        return cls(
            settings.path, min_length=settings.min_length, max_length=settings.max_length
        )

    def __repr__(self) -> str:
        where = str(self.path) if self.path is not None else "<bundled>"
        return f"BadPasswordCorpus({where!r}, loaded={self._loaded})"

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @property
    def loaded(self) -> bool:
        return self._loaded

    def _read_bytes(self) -> bytes:
        try:
            if self.path is None:
                resource = importlib_resources.files("inputforge.data").joinpath("badpass.bin")
                return resource.read_bytes()
            return self.path.read_bytes()
        except OSError as exc:
            raise CorpusLoadError(f"cannot read bad-password corpus: {exc}") from exc

    def _parse(self, data: bytes) -> frozenset[bytes]:
        if len(data) % RECORD_SIZE:
            raise CorpusLoadError(
                f"bad-password corpus is truncated: {len(data)} bytes is not a "
                f"multiple of the {RECORD_SIZE}-byte record size"
            )
        return frozenset(data[i : i + RECORD_SIZE] for i in range(0, len(data), RECORD_SIZE))

    def load(self) -> None:
        """Populate the set once; concurrent callers block until it is ready."""

        if self._loaded:
            return
        self._lock.acquire_write()
        try:
            if self._loaded:
                return
            entries = self._parse(self._read_bytes())
            self._entries = entries
            self._loaded = True
        finally:
            self._lock.release_write()
        logger.info("loaded %d bad-password records", len(entries))

    def __len__(self) -> int:
        self.load()
        return len(self._entries)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @staticmethod
    def digest(password: str) -> bytes:
        """Return the truncated digest stored for ``password``."""

        return hashlib.sha256(password.encode("utf-8")).digest()[:RECORD_SIZE]

    def covers(self, password: str) -> bool:
        """Return ``True`` when ``password``'s length lies in the covered band."""

        return self.min_length <= len(password) < self.max_length

    def is_bad(self, password: str) -> bool:
        """Return ``True`` when ``password`` is (probably) in the corpus."""

        if not self.covers(password):
            return False
        self.load()
        key = self.digest(password)
        self._lock.acquire_read()
        try:
            return key in self._entries
        finally:
            self._lock.release_read()

    def __contains__(self, password: object) -> bool:
        return isinstance(password, str) and self.is_bad(password)


@lru_cache(maxsize=1)
def shared_corpus() -> BadPasswordCorpus:
    """Return the process-wide corpus over the bundled list."""

    return BadPasswordCorpus()


def is_bad_password(password: str, *, corpus: BadPasswordCorpus | None = None) -> bool:
    """Check ``password`` against ``corpus`` or the shared bundled corpus."""

    if corpus is None:
        corpus = shared_corpus()
    return corpus.is_bad(password)
