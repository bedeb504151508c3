# selector.py
# Heuristics that predict the fastest algorithm for a (text, pattern) pair.

from abc import ABC, abstractmethod

from .config import (
    ALPHABET_SCAN_LIMIT,
    SMALL_ALPHABET_THRESHOLD,
    TINY_PATTERN_LENGTH,
    TINY_TEXT_LENGTH,
)


class Selector(ABC):
    """
    Picks one registered algorithm for an input, or returns None to decline.

    Declining means "run the full algorithm set instead"; the scorer leaves
    such cases out rather than counting them as wrong. The time spent in
    choose() is charged to the selector, so implementations should stay cheap.
    """

    key = None

    @abstractmethod
    def choose(self, text, pattern):
        """Returns an algorithm name or None."""

    @abstractmethod
    def strategy_description(self):
        """Human-readable summary for reports."""


def count_distinct_prefix_chars(pattern, limit=ALPHABET_SCAN_LIMIT):
    """Distinct characters among the first `limit` characters; O(min(m, limit))."""
    seen = set()
    for i in range(min(len(pattern), limit)):
        seen.add(pattern[i])
    return len(seen)


class HeuristicSelector(Selector):

    key = "heuristic"

    def choose(self, text, pattern):
        n = len(text)
        m = len(pattern)

        if n < TINY_TEXT_LENGTH or m <= TINY_PATTERN_LENGTH:
            return "Naive"

        # DNA, binary and other low-diversity patterns.
        if count_distinct_prefix_chars(pattern) < SMALL_ALPHABET_THRESHOLD:
            return "KMP"

        return "Hybrid"

    def strategy_description(self):
        return ("Smart Selection: Naive for tiny inputs, KMP for small alphabets (DNA/binary), "
                "and the Sunday-Raita Hybrid for standard text.")


class PatternShapeSelector(Selector):

    key = "shape"

    def choose(self, text, pattern):
        n = len(text)
        m = len(pattern)

        if m <= 3:
            return "Naive"
        if self._has_repeating_prefix(pattern):
            return "KMP"
        if m > 10 and n > 1000:
            return "RabinKarp"
        return "Naive"

    @staticmethod
    def _has_repeating_prefix(pattern):
        if len(pattern) < 2:
            return False
        first = pattern[0]
        count = 0
        for i in range(min(len(pattern), 5)):
            if pattern[i] == first:
                count += 1
        return count >= 3

    def strategy_description(self):
        return "Pattern shape: choose based on pattern length and repeating prefixes."


class DecliningSelector(Selector):
    """Never chooses; every case runs the full algorithm set."""

    key = "none"

    def choose(self, text, pattern):
        return None

    def strategy_description(self):
        return "No pre-analysis: always run every algorithm."


SELECTORS = {
    HeuristicSelector.key: HeuristicSelector,
    PatternShapeSelector.key: PatternShapeSelector,
    DecliningSelector.key: DecliningSelector,
}


def get_selector(key):
    try:
        return SELECTORS[key]()
    except KeyError:
        raise ValueError(f"Unknown selector '{key}'. Choose from: {', '.join(SELECTORS)}") from None
