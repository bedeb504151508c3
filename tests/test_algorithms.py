import pytest
from hypothesis import given, strategies as st

from matchbench.algorithms import (
    ENGINES,
    KMP,
    BoyerMoore,
    Hybrid,
    MatchResult,
    Naive,
    RabinKarp,
    build_bad_character_table,
    build_good_suffix_table,
    build_shift_table,
    compute_lps,
    compute_suffixes,
    indices_to_string,
    naive_search,
    rabin_karp_search,
)

ALL_ENGINES = [engine_cls() for engine_cls in ENGINES]
ENGINE_IDS = [engine.get_name() for engine in ALL_ENGINES]

small_text = st.text(alphabet="abc", max_size=40)
small_pattern = st.text(alphabet="abc", max_size=6)


def find_all(text, pattern):
    """Reference implementation built on str.find."""
    if pattern == "":
        return list(range(len(text) + 1))
    matches = []
    start = 0
    while True:
        pos = text.find(pattern, start)
        if pos == -1:
            return matches
        matches.append(pos)
        start = pos + 1


@pytest.mark.parametrize("engine", ALL_ENGINES, ids=ENGINE_IDS)
@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        ("abababab", "abab", "0,2,4"),
        ("hello world", "xyz", ""),
        ("aaaa", "aa", "0,1,2"),
        ("abc", "", "0,1,2,3"),
        ("", "", "0"),
        ("abc", "abcd", ""),
        ("", "a", ""),
        ("mississippi", "issi", "1,4"),
        ("mississippi", "s", "2,3,5,6"),
        ("abcxxxabcxxxabc", "abcxxxabc", "0,6"),
        ("xxabcxxxabcxxabcxxxabc", "abcxxxabc", "2,13"),
        ("GATTACAGATTACAGATTACA", "GATTACA", "0,7,14"),
        ("pattern", "pattern", "0"),
    ],
)
def test_known_scenarios(engine, text, pattern, expected):
    assert engine.solve(text, pattern).canonical() == expected


def test_kmp_failure_table():
    assert compute_lps("aabaabaaa") == [0, 1, 0, 1, 2, 3, 4, 5, 2]
    assert compute_lps("ababaca") == [0, 0, 1, 2, 3, 0, 1]
    assert compute_lps("") == []


def test_boyer_moore_tables():
    assert build_bad_character_table("abcab") == {"a": 3, "b": 4, "c": 2}
    assert compute_suffixes("abab") == [0, 2, 0, 4]
    assert build_good_suffix_table("abab") == [2, 2, 2, 4, 1]
    assert compute_suffixes("aa") == [1, 2]
    assert build_good_suffix_table("aa") == [1, 1, 2]


def test_hybrid_shift_table():
    assert build_shift_table("abc") == {"a": 3, "b": 2, "c": 1}
    # The last occurrence wins.
    assert build_shift_table("abca") == {"a": 1, "b": 3, "c": 2}


def test_rabin_karp_verifies_hash_collisions():
    # ord("a") == 97 and ord("Æ") == 198 collide modulo 101.
    assert (ord("Æ") - ord("a")) % 101 == 0
    assert rabin_karp_search("Æa", "a") == [1]


def test_rabin_karp_with_degenerate_prime_is_still_exact():
    text = "abracadabra"
    assert rabin_karp_search(text, "abra", prime=1) == [0, 7]
    assert RabinKarp(prime=1).solve(text, "cad").canonical() == "4"


def test_match_result_canonical_form():
    assert MatchResult.from_indices([0, 2, 4]).canonical() == "0,2,4"
    assert str(MatchResult()) == ""
    assert indices_to_string([7]) == "7"
    assert list(MatchResult.from_indices([1, 3])) == [1, 3]


def test_not_implemented_result():
    result = MatchResult.not_implemented()
    assert not result.implemented
    assert result.canonical() == ""


def test_engine_names():
    assert [e.get_name() for e in ALL_ENGINES] == ["Naive", "KMP", "RabinKarp", "BoyerMoore", "Hybrid"]


@given(small_text, small_pattern)
def test_all_engines_agree_with_naive(text, pattern):
    expected = Naive().solve(text, pattern).canonical()
    assert expected == indices_to_string(find_all(text, pattern))
    for engine in ALL_ENGINES:
        assert engine.solve(text, pattern).canonical() == expected, engine.get_name()


@given(st.text(max_size=30), st.text(min_size=1, max_size=4))
def test_all_engines_agree_on_arbitrary_unicode(text, pattern):
    expected = indices_to_string(find_all(text, pattern))
    for engine in ALL_ENGINES:
        assert engine.solve(text, pattern).canonical() == expected, engine.get_name()


@given(st.text(max_size=50))
def test_empty_pattern_matches_everywhere(text):
    expected = ",".join(str(i) for i in range(len(text) + 1))
    for engine in ALL_ENGINES:
        assert engine.solve(text, "").canonical() == expected


@given(st.text(max_size=20), st.integers(min_value=1, max_value=5))
def test_oversize_pattern_never_matches(text, extra):
    pattern = (text + "x" * extra)
    for engine in ALL_ENGINES:
        assert engine.solve(text, pattern).canonical() == ""


@given(small_text, small_pattern)
def test_solve_is_idempotent(text, pattern):
    for engine in ALL_ENGINES:
        assert engine.solve(text, pattern) == engine.solve(text, pattern)


@given(st.text(alphabet="abcx", max_size=60))
def test_boyer_moore_never_skips_repeated_suffix_matches(text):
    pattern = "abcxxxabc"
    assert BoyerMoore().solve(text, pattern).canonical() == indices_to_string(naive_search(text, pattern))


@pytest.mark.parametrize("engine_cls", [KMP, Hybrid])
def test_long_periodic_input(engine_cls):
    text = "ab" * 500
    assert len(engine_cls().solve(text, "abab")) == 499
