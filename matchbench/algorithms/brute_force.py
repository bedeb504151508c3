from .base import MatchEngine, MatchResult


def naive_search(text, pattern):
    n = len(text)
    m = len(pattern)
    indices = []

    # With m == 0 the inner loop never runs, so every offset 0..n matches.
    for i in range(n - m + 1):
        match = True
        for j in range(m):
            if text[i + j] != pattern[j]:
                match = False
                break
        if match:
            indices.append(i)

    return indices


class Naive(MatchEngine):
    """Checks the pattern against every candidate offset. Ground truth for the other engines."""

    name = "Naive"

    def solve(self, text, pattern):
        return MatchResult.from_indices(naive_search(text, pattern))
