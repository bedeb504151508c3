# base.py
# The contract every string-matching algorithm implements.

from abc import ABC, abstractmethod
from dataclasses import dataclass


def indices_to_string(indices):
    """Joins match offsets into the canonical comma-separated form ("" when empty)."""
    return ",".join(str(i) for i in indices)


def empty_pattern_offsets(text):
    """An empty pattern matches at every offset, including len(text)."""
    return list(range(len(text) + 1))


def matches_at(text, pattern, pos):
    """Checks character by character whether pattern occurs in text at pos."""
    if pos + len(pattern) > len(text):
        return False
    for j in range(len(pattern)):
        if text[pos + j] != pattern[j]:
            return False
    return True


@dataclass(frozen=True)
class MatchResult:
    """
    Offsets returned by a single solve() call.

    `implemented` is False only for the placeholder result of an unfinished
    algorithm; such a result carries no offsets and never equals an expected value.
    """
    offsets: tuple = ()
    implemented: bool = True

    @classmethod
    def from_indices(cls, indices):
        return cls(offsets=tuple(indices))

    @classmethod
    def not_implemented(cls):
        return cls(offsets=(), implemented=False)

    def canonical(self):
        return indices_to_string(self.offsets)

    def __str__(self):
        return self.canonical()

    def __len__(self):
        return len(self.offsets)

    def __iter__(self):
        return iter(self.offsets)


class MatchEngine(ABC):
    """
    Finds every start offset of `pattern` in `text`.

    Implementations hold no state between calls. An empty pattern matches at
    offsets 0..len(text) inclusive; a pattern longer than the text matches nowhere.
    """

    name = None

    @abstractmethod
    def solve(self, text, pattern):
        """Returns a MatchResult with strictly increasing offsets."""

    def get_name(self):
        return self.name or type(self).__name__

    def __repr__(self):
        return f"<{type(self).__name__} name={self.get_name()!r}>"
