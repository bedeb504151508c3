# utils.py
# Small helpers shared by the command line and the GUI.

import re

ANSI_PATTERN = re.compile(r"\x1b\[[;\d]*m")


def parse_test_indices(tokens):
    """
    Turns tokens such as ["0", "3-5", "9"] into sorted, unique, non-negative indices.

    Returns (indices, invalid_tokens). Range checks are left to the caller.
    """
    indices = set()
    invalid = []
    for token in tokens:
        token = token.strip()
        try:
            if "-" in token:
                parts = token.split("-")
                if len(parts) != 2:
                    raise ValueError(token)
                start, end = int(parts[0]), int(parts[1])
                candidates = range(start, end + 1)
            else:
                candidates = [int(token)]
        except ValueError:
            invalid.append(token)
            continue
        for i in candidates:
            if i >= 0:
                indices.add(i)
    return sorted(indices), invalid


def truncate(s, max_length, ellipsis=".."):
    if len(s) <= max_length:
        return s
    return s[:max_length - len(ellipsis)] + ellipsis


def visible_length(s):
    """Length of s ignoring ANSI colour codes."""
    return len(ANSI_PATTERN.sub("", s))


def pad_right(s, width):
    padding = width - visible_length(s)
    if padding <= 0:
        return s
    return s + " " * padding


def to_microseconds(nanoseconds):
    return nanoseconds / 1000.0
