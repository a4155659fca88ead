"""Randomness sources and deterministic seed derivation."""

from .seed import (
    canonicalize_key,
    derive_seed,
    ensure_secret_present,
    get_secret_bytes,
    seeded_source_for,
    source_from_config,
)
from .source import RandomSource, SeededSource, SystemSource

__all__ = [
    "RandomSource",
    "SeededSource",
    "SystemSource",
    "canonicalize_key",
    "derive_seed",
    "ensure_secret_present",
    "get_secret_bytes",
    "seeded_source_for",
    "source_from_config",
]
