from .base import MatchEngine, MatchResult, empty_pattern_offsets


def build_bad_character_table(pattern):
    """Last index of each character in the pattern. Absent characters count as -1."""
    bad_char = {}
    for i, ch in enumerate(pattern):
        bad_char[ch] = i
    return bad_char


def compute_suffixes(pattern):
    """
    suffixes[i] is the length of the longest suffix of pattern[:i + 1]
    that is also a suffix of the whole pattern.
    """
    m = len(pattern)
    suffixes = [0] * m
    if m == 0:
        return suffixes

    suffixes[m - 1] = m
    g = m - 1
    f = 0
    for i in range(m - 2, -1, -1):
        if i > g and suffixes[i + m - 1 - f] < i - g:
            suffixes[i] = suffixes[i + m - 1 - f]
        else:
            if i < g:
                g = i
            f = i
            while g >= 0 and pattern[g] == pattern[g + m - 1 - f]:
                g -= 1
            suffixes[i] = f - g
    return suffixes


def build_good_suffix_table(pattern):
    """
    Shift table of length m + 1.

    good_suffix[0] is the shift after a full match; after a mismatch at
    pattern index j the scan uses good_suffix[j + 1].
    """
    m = len(pattern)
    suffixes = compute_suffixes(pattern)
    good_suffix = [m] * (m + 1)

    # Shifts that align a border (prefix == suffix) of the pattern.
    j = 0
    for i in range(m - 1, -2, -1):
        if i == -1 or suffixes[i] == i + 1:
            while j < m - 1 - i:
                if good_suffix[j] == m:
                    good_suffix[j] = m - 1 - i
                j += 1

    # Shifts that align another occurrence of the matched suffix.
    for i in range(m - 1):
        good_suffix[m - suffixes[i]] = m - 1 - i

    return good_suffix


def boyer_moore_search(text, pattern):
    n = len(text)
    m = len(pattern)
    if m == 0:
        return empty_pattern_offsets(text)

    bad_char = build_bad_character_table(pattern)
    good_suffix = build_good_suffix_table(pattern)
    indices = []

    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[s + j]:
            j -= 1

        if j < 0:
            indices.append(s)
            s += good_suffix[0]
        else:
            bad_char_shift = max(1, j - bad_char.get(text[s + j], -1))
            s += max(bad_char_shift, good_suffix[j + 1])

    return indices


class BoyerMoore(MatchEngine):
    """Right-to-left window scan with the bad-character and good-suffix shift rules."""

    name = "BoyerMoore"

    def solve(self, text, pattern):
        return MatchResult.from_indices(boyer_moore_search(text, pattern))
