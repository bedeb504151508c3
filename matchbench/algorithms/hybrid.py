from ..config import HYBRID_NAIVE_CUTOFF
from .base import MatchEngine, MatchResult
from .brute_force import naive_search


def build_shift_table(pattern):
    """
    Sunday shift for the character just after the window: m - last index for
    pattern characters. Anything else shifts by m + 1 (see hybrid_search).
    """
    m = len(pattern)
    shift = {}
    for i, ch in enumerate(pattern):
        shift[ch] = m - i
    return shift


def hybrid_search(text, pattern):
    n = len(text)
    m = len(pattern)

    # Heuristics cost more than they save on tiny patterns.
    if m <= HYBRID_NAIVE_CUTOFF:
        return naive_search(text, pattern)

    shift = build_shift_table(pattern)
    default_shift = m + 1

    # Raita's order: last, first, middle, then the gap.
    first_ch = pattern[0]
    middle = m // 2
    middle_ch = pattern[middle]
    last_ch = pattern[m - 1]

    indices = []
    s = 0
    while s <= n - m:
        if text[s + m - 1] == last_ch and text[s] == first_ch and text[s + middle] == middle_ch:
            j = 1
            while j < m - 1 and text[s + j] == pattern[j]:
                j += 1
            if j >= m - 1:
                indices.append(s)

        if s + m < n:
            s += shift.get(text[s + m], default_shift)
        else:
            s += 1

    return indices


class Hybrid(MatchEngine):
    """Sunday's look-past-the-window shift combined with Raita's comparison order."""

    name = "Hybrid"

    def solve(self, text, pattern):
        return MatchResult.from_indices(hybrid_search(text, pattern))
