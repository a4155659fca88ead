"""Reference data: TLDs, countries, word lists and the bad-password corpus file."""

from .tables import Country, cctlds, countries, country_cctlds, generic_tlds, tlds_by_length
from .words import (
    WordList,
    ag_words,
    coerce_word_list,
    default_word_list,
    eff_long_words,
    load_word_list,
)

__all__ = [
    "Country",
    "WordList",
    "ag_words",
    "cctlds",
    "coerce_word_list",
    "countries",
    "country_cctlds",
    "default_word_list",
    "eff_long_words",
    "generic_tlds",
    "load_word_list",
    "tlds_by_length",
]
