"""Deterministic seeding helpers.

This module derives reproducible :class:`~inputforge.rand.source.SeededSource`
instances from a user-provided secret using HMAC-SHA256 with strict domain
separation.  Stream keys are canonicalized so that variations in case or
whitespace do not change the derived seed.

Security notes
--------------
A non-empty secret makes the derived streams unpredictable to anyone without
the secret.  When the secret is omitted, functions fall back to unkeyed
hashes; this is predictable and suitable only for test data.  Secrets and
derived digests are never logged or exposed.
"""

from __future__ import annotations

import hashlib
import hmac
import re
import unicodedata
from typing import Final

from inputforge.config import ConfigModel

from .source import RandomSource, SeededSource, SystemSource

# ---------------------------------------------------------------------------
# Domain separation constants
# ---------------------------------------------------------------------------

_NS_STREAM: Final = b"inputforge/v1/stream"


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------


def canonicalize_key(key: str) -> str:
    """Normalize a stream key for hashing.

    The normalization steps are:

    - strip leading/trailing whitespace
    - collapse internal whitespace runs to a single space
    - lowercase
    - NFC normalize (not NFKC)
    """

    normalized = unicodedata.normalize("NFC", key.strip())
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.lower()


# ---------------------------------------------------------------------------
# Secret extraction
# ---------------------------------------------------------------------------


def get_secret_bytes(cfg: ConfigModel, *, require: bool = False) -> bytes:
    """Return the seed secret as bytes.

    Parameters
    ----------
    cfg:
        Configuration model holding the seed secret.
    require:
        If ``True`` and the secret is missing, ``ValueError`` is raised.
    """

    secret = cfg.randomness.seed.secret
    if secret is None:
        if require:
            raise ValueError("Missing seed secret")
        return b""
    return secret.get_secret_value().encode("utf-8")


def ensure_secret_present(cfg: ConfigModel, *, strict: bool) -> bool:
    """Return whether a secret is configured; raise in ``strict`` mode when absent."""

    present = cfg.randomness.seed.secret is not None
    if strict and not present:
        raise ValueError(
            f"Seed secret required; set the {cfg.randomness.seed.secret_env} environment variable"
        )
    return present


# ---------------------------------------------------------------------------
# Reproducible sources
# ---------------------------------------------------------------------------


def derive_seed(secret: bytes, key: str) -> int:
    """Return a 256-bit integer seed for the stream named ``key``.

    The seed is ``HMAC(secret, _NS_STREAM || canonical_key)``; with an empty
    secret SHA256 over the same concatenation is used instead.
    """

    data = _NS_STREAM + canonicalize_key(key).encode("utf-8")
    if secret:
        digest = hmac.new(secret, data, hashlib.sha256).digest()
    else:
        digest = hashlib.sha256(data).digest()
    return int.from_bytes(digest, "big")


def seeded_source_for(key: str, *, cfg: ConfigModel) -> SeededSource:
    """Return a reproducible source for the stream named ``key``."""

    return SeededSource(derive_seed(get_secret_bytes(cfg), key))


def source_from_config(cfg: ConfigModel, *, key: str = "default") -> RandomSource:
    """Return the source selected by ``cfg.randomness.mode``."""

    if cfg.randomness.mode == "seeded":
        return seeded_source_for(key, cfg=cfg)
    return SystemSource()


__all__ = [
    "canonicalize_key",
    "get_secret_bytes",
    "ensure_secret_present",
    "derive_seed",
    "seeded_source_for",
    "source_from_config",
]
