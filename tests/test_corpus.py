from __future__ import annotations

import hashlib
import logging
import threading
from pathlib import Path

import pytest

from inputforge.config import load_config
from inputforge.corpus import RECORD_SIZE, BadPasswordCorpus, is_bad_password, shared_corpus
from inputforge.rand import SystemSource
from inputforge.synth import password
from inputforge.utils.errors import CorpusLoadError

KNOWN_BAD = ["password", "123456", "qwerty", "letmein", "dragon", "iloveyou"]


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    path = tmp_path / "badpass.bin"
    path.write_bytes(
        b"".join(hashlib.sha256(p.encode()).digest()[:RECORD_SIZE] for p in KNOWN_BAD)
    )
    return path


def test_known_entries_are_bad(corpus_file: Path) -> None:
    corpus = BadPasswordCorpus(corpus_file)
    for value in KNOWN_BAD:
        assert corpus.is_bad(value)
        assert value in corpus
    assert len(corpus) == len(KNOWN_BAD)


def test_random_long_password_is_not_bad(corpus_file: Path) -> None:
    corpus = BadPasswordCorpus(corpus_file)
    value = password(SystemSource(), 24, 32, lower=True, upper=True, digit=True)
    assert not corpus.is_bad(value)


def test_length_band_skips_lookup(tmp_path: Path) -> None:
    short = ["ab", "a" * 40]
    path = tmp_path / "band.bin"
    path.write_bytes(b"".join(BadPasswordCorpus.digest(p) for p in short))
    corpus = BadPasswordCorpus(path)
    assert not corpus.covers("ab") and not corpus.is_bad("ab")
    assert not corpus.is_bad("a" * 40)
    assert not corpus.loaded  # nothing in the band was asked for
    wide = BadPasswordCorpus(path, min_length=2, max_length=41)
    assert wide.is_bad("ab") and wide.is_bad("a" * 40)


def test_load_is_lazy_and_idempotent(corpus_file: Path, caplog: pytest.LogCaptureFixture) -> None:
    corpus = BadPasswordCorpus(corpus_file)
    assert not corpus.loaded
    with caplog.at_level(logging.INFO, logger="inputforge"):
        corpus.load()
        corpus.load()
    assert corpus.loaded
    loads = [r for r in caplog.records if "bad-password records" in r.getMessage()]
    assert len(loads) == 1
    assert "6" in loads[0].getMessage()


def test_missing_file_is_load_error(tmp_path: Path) -> None:
    corpus = BadPasswordCorpus(tmp_path / "missing.bin")
    with pytest.raises(CorpusLoadError):
        corpus.is_bad("password")
    with pytest.raises(OSError):
        corpus.load()
    assert not corpus.loaded


def test_truncated_file_is_load_error(tmp_path: Path) -> None:
    path = tmp_path / "short.bin"
    path.write_bytes(b"\x00" * (RECORD_SIZE * 2 + 3))
    with pytest.raises(CorpusLoadError, match="truncated"):
        BadPasswordCorpus(path).load()


def test_concurrent_first_use(corpus_file: Path) -> None:
    corpus = BadPasswordCorpus(corpus_file)
    barrier = threading.Barrier(16)
    results: list[bool] = []
    lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        verdict = all(corpus.is_bad(p) for p in KNOWN_BAD) and not corpus.is_bad("x9!Qz#kLp2")
        with lock:
            results.append(verdict)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [True] * 16
    assert len(corpus) == len(KNOWN_BAD)


def test_bundled_corpus() -> None:
    assert shared_corpus() is shared_corpus()
    assert is_bad_password("password")
    assert is_bad_password("hunter2")
    assert not is_bad_password("pw")  # below the covered band
    assert not is_bad_password("correct-horse-battery-staple-but-longer-than-forty")


def test_explicit_corpus_argument(corpus_file: Path) -> None:
    corpus = BadPasswordCorpus(corpus_file)
    assert is_bad_password("dragon", corpus=corpus)
    assert not is_bad_password("hunter2", corpus=corpus)


def test_from_config(corpus_file: Path, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(
        f"corpus:\n  path: {corpus_file.as_posix()}\n  min_length: 4\n  max_length: 20\n",
        encoding="utf-8",
    )
    corpus = BadPasswordCorpus.from_config(load_config(cfg_file, env={}))
    assert corpus.path == corpus_file
    assert (corpus.min_length, corpus.max_length) == (4, 20)
    assert corpus.is_bad("qwerty")


def test_invalid_band() -> None:
    with pytest.raises(ValueError):
        BadPasswordCorpus(min_length=10, max_length=10)
