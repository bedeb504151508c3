from .base import MatchEngine, MatchResult, empty_pattern_offsets


def compute_lps(pattern):
    """
    Longest proper prefix of pattern[:i + 1] that is also a suffix of it, for every i.

    Example: compute_lps("aabaabaaa") == [0, 1, 0, 1, 2, 3, 4, 5, 2]
    """
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        else:
            if length != 0:
                length = lps[length - 1]
            else:
                lps[i] = 0
                i += 1
    return lps


def kmp_search(text, pattern):
    n = len(text)
    m = len(pattern)
    if m == 0:
        return empty_pattern_offsets(text)

    lps = compute_lps(pattern)
    indices = []

    i = 0  # index for text
    j = 0  # index for pattern
    while i < n:
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == m:
                indices.append(i - m)
                j = lps[m - 1]
        else:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1

    return indices


class KMP(MatchEngine):
    """Knuth-Morris-Pratt: linear-time scan driven by the failure (LPS) table."""

    name = "KMP"

    def solve(self, text, pattern):
        return MatchResult.from_indices(kmp_search(text, pattern))
