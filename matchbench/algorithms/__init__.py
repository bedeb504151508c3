# algorithms/__init__.py
# Every exact string-matching engine, plus the plain search functions behind them.

from .base import MatchEngine, MatchResult, indices_to_string, matches_at
from .brute_force import Naive, naive_search
from .kmp import KMP, compute_lps, kmp_search
from .rabin_karp import RabinKarp, rabin_karp_search
from .boyer_moore import (
    BoyerMoore,
    boyer_moore_search,
    build_bad_character_table,
    build_good_suffix_table,
    compute_suffixes,
)
from .hybrid import Hybrid, build_shift_table, hybrid_search

# Registration order used by default_registry().
ENGINES = (Naive, KMP, RabinKarp, BoyerMoore, Hybrid)

__all__ = [
    "MatchEngine",
    "MatchResult",
    "indices_to_string",
    "matches_at",
    "Naive",
    "KMP",
    "RabinKarp",
    "BoyerMoore",
    "Hybrid",
    "ENGINES",
    "naive_search",
    "kmp_search",
    "rabin_karp_search",
    "boyer_moore_search",
    "hybrid_search",
    "compute_lps",
    "build_bad_character_table",
    "compute_suffixes",
    "build_good_suffix_table",
    "build_shift_table",
]
