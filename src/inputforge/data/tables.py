"""Read-only reference tables: IANA top-level domains and ISO countries.

Both tables ship as package data and are parsed once per process.  Callers
receive immutable collections; nothing here is ever mutated after load.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources as importlib_resources

__all__ = [
    "Country",
    "countries",
    "generic_tlds",
    "tlds_by_length",
    "cctlds",
    "country_cctlds",
]

_PACKAGE = "inputforge.data"


def _read_text(name: str) -> str:
    return importlib_resources.files(_PACKAGE).joinpath(name).read_text(encoding="utf-8")


@dataclass(slots=True, frozen=True)
class Country:
    """One ISO 3166-1 record with its Internet country-code TLD."""

    name: str
    alpha2: str
    alpha3: str
    cctld: str


@lru_cache(maxsize=1)
def generic_tlds() -> frozenset[str]:
    """Return every TLD in the IANA root zone list, lowercase."""

    lines = (line.strip().lower() for line in _read_text("tlds.txt").splitlines())
    return frozenset(line for line in lines if line and not line.startswith("#"))


@lru_cache(maxsize=1)
def tlds_by_length() -> dict[int, tuple[str, ...]]:
    """Return TLDs grouped by length, each group sorted for deterministic draws."""

    grouped: dict[int, list[str]] = {}
    for tld in generic_tlds():
        grouped.setdefault(len(tld), []).append(tld)
    return {length: tuple(sorted(group)) for length, group in sorted(grouped.items())}


@lru_cache(maxsize=1)
def countries() -> tuple[Country, ...]:
    """Return all country records sorted by name."""

    reader = csv.DictReader(io.StringIO(_read_text("countries.csv")))
    records = [
        Country(row["name"], row["alpha2"], row["alpha3"], row["cctld"]) for row in reader
    ]
    return tuple(sorted(records, key=lambda c: c.name))


@lru_cache(maxsize=1)
def country_cctlds() -> frozenset[str]:
    """Return the ccTLD of every country record."""

    return frozenset(country.cctld for country in countries())


@lru_cache(maxsize=1)
def cctlds() -> tuple[str, ...]:
    """Return the sorted ccTLDs that are also delegated in the root zone.

    A few ISO codes (``bq``, ``bl``, ``mf``, ``um``, ``eh``) have no delegated
    TLD; they are excluded so generated domains always resolve to a real
    top-level domain.
    """

    delegated = generic_tlds()
    return tuple(sorted(tld for tld in country_cctlds() if tld in delegated))
