import pytest

from algonotes.strings import (
    failure_function,
    kmp_find_loop,
    kmp_find_next,
    kmp_find_recursive,
    longest_palindromic_subsequence,
    next_table,
)

SEARCH_CASES = [
    ("hello world", "world"),
    ("hello world", "hello"),
    ("hello world", "o w"),
    ("aaaab", "aab"),
    ("abababc", "ababc"),
    ("abcabcabd", "abcabd"),
    ("abc", "abcd"),
    ("abc", "abd"),
    ("abc", "abc"),
    ("mississippi", "issip"),
    ("mississippi", "ssi"),
    ("mississippi", "pix"),
    ("aabaabaaab", "aaab"),
    ("xyz", "z"),
    ("", "a"),
    ("abc", ""),
]


@pytest.mark.parametrize("text,pattern", SEARCH_CASES)
def test_finders_agree_with_str_find(text, pattern):
    expected = text.find(pattern)
    results = [
        kmp_find_loop(text, pattern),
        kmp_find_next(text, pattern),
        kmp_find_recursive(text, pattern),
    ]
    assert results == [expected, expected, expected]


def test_failure_function_pinned():
    assert failure_function("abab") == [-1, -1, 0, 1]
    assert failure_function("aaaa") == [-1, 0, 1, 2]


@pytest.mark.parametrize("pattern", ["abab", "aabaaab", "abcabcab", "zzzz", "abacabad"])
def test_failure_entries_are_borders(pattern):
    table = failure_function(pattern)
    assert len(table) == len(pattern)
    for i, k in enumerate(table):
        assert k < i or (i == 0 and k == -1)
        assert pattern[: k + 1] == pattern[i - k : i + 1]


def test_next_table_pinned():
    assert next_table("abab") == [-1, 0, -1, 0]


def test_next_table_empty():
    assert next_table("") == []


@pytest.mark.parametrize("pattern", ["abab", "aabaaab", "abcabcab", "zzzz", "abacabad"])
def test_next_table_skips_known_mismatch(pattern):
    table = next_table(pattern)
    assert table[0] == -1
    for i, k in enumerate(table):
        if k >= 0:
            assert pattern[k] != pattern[i]
            assert pattern[:k] == pattern[i - k : i]


def _is_subsequence(small, big):
    remaining = iter(big)
    return all(char in remaining for char in small)


@pytest.mark.parametrize("text", ["character", "bbbab", "abcd", "forgeeksskeegfor", "a", "abca"])
def test_palindrome_invariants(text):
    result = longest_palindromic_subsequence(text)
    assert result == result[::-1]
    assert _is_subsequence(result, text)
    assert len(result) >= 1


@pytest.mark.parametrize("text", ["racecar", "abba", "x", "noon"])
def test_palindrome_of_palindrome_is_itself(text):
    assert longest_palindromic_subsequence(text) == text


def test_palindrome_of_distinct_characters_is_single():
    result = longest_palindromic_subsequence("abcd")
    assert len(result) == 1
    assert result in "abcd"


def test_palindrome_of_empty_text():
    assert longest_palindromic_subsequence("") == ""