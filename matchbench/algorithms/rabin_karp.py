from ..config import RABIN_KARP_BASE, RABIN_KARP_PRIME
from .base import MatchEngine, MatchResult, empty_pattern_offsets, matches_at


def rabin_karp_search(text, pattern, base=RABIN_KARP_BASE, prime=RABIN_KARP_PRIME):
    n = len(text)
    m = len(pattern)
    if m == 0:
        return empty_pattern_offsets(text)
    if m > n:
        return []

    indices = []
    h = pow(base, m - 1, prime)
    p_hash = 0
    t_hash = 0

    for i in range(m):
        p_hash = (base * p_hash + ord(pattern[i])) % prime
        t_hash = (base * t_hash + ord(text[i])) % prime

    for i in range(n - m + 1):
        # Equal hashes are only a hint; the window is always compared in full.
        if p_hash == t_hash and matches_at(text, pattern, i):
            indices.append(i)
        if i < n - m:
            t_hash = (base * (t_hash - ord(text[i]) * h) + ord(text[i + m])) % prime
            if t_hash < 0:
                t_hash += prime

    return indices


class RabinKarp(MatchEngine):
    """Rolling polynomial hash over the text window, verified on every hash hit."""

    name = "RabinKarp"

    def __init__(self, base=RABIN_KARP_BASE, prime=RABIN_KARP_PRIME):
        self.base = base
        self.prime = prime

    def solve(self, text, pattern):
        return MatchResult.from_indices(
            rabin_karp_search(text, pattern, base=self.base, prime=self.prime)
        )
