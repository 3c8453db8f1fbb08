"""Substring search by Knuth-Morris-Pratt and longest palindromic subsequences."""

from __future__ import annotations


def failure_function(pattern: str) -> list[int]:
    """Failure table of a pattern.

    Entry ``i`` is the last index of the longest proper prefix of
    ``pattern[:i + 1]`` that is also its suffix, or -1 when there is none.
    """
    table = [-1] * len(pattern)
    j = -1
    for i, char in enumerate(pattern[1:], 1):
        while j >= 0 and pattern[j + 1] != char:
            j = table[j]
        if pattern[j + 1] == char:
            j += 1
        table[i] = j
    return table


def next_table(pattern: str) -> list[int]:
    """Optimised ``next`` table: where to resume matching after a mismatch at i.

    A resume position never holds the same character as position i, so a
    known mismatch is not compared twice; -1 means advance the text.
    """
    size = len(pattern)
    if not size:
        return []
    table = [-1] * size
    i, j = 0, -1
    while i < size - 1:
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            table[i] = j if pattern[i] != pattern[j] else table[j]
        else:
            j = table[j]
    return table


def kmp_find_loop(text: str, pattern: str) -> int:
    """Index of the first occurrence of pattern in text, or -1."""
    if not pattern:
        return 0
    table = failure_function(pattern)
    last = len(pattern) - 1
    j = -1
    for i, char in enumerate(text):
        while j >= 0 and pattern[j + 1] != char:
            j = table[j]
        if pattern[j + 1] == char:
            j += 1
        if j == last:
            return i - j
    return -1


def kmp_find_next(text: str, pattern: str) -> int:
    """Index of the first occurrence of pattern in text, using :func:`next_table`."""
    table = next_table(pattern)
    n, m = len(text), len(pattern)
    i = j = 0
    while i < n and j < m:
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - j if j == m else -1


def kmp_find_recursive(text: str, pattern: str) -> int:
    """Index of the first occurrence of pattern in text, falling back through the failure table."""
    table = failure_function(pattern)
    n, m = len(text), len(pattern)
    i = j = 0
    while i < n and j < m:
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        elif j > 0:
            j = table[j - 1] + 1
        else:
            j = -1
    return i - j if j == m else -1


def longest_palindromic_subsequence(text: str) -> str:
    """One longest palindrome that can be read out of text by deleting characters."""
    n = len(text)
    if n == 0:
        return ""
    best = [[0] * n for _ in range(n)]
    for i in range(n):
        best[i][i] = 1
    for span in range(1, n):
        for i in range(n - span):
            j = i + span
            if text[i] == text[j]:
                best[i][j] = 2 if span == 1 else best[i + 1][j - 1] + 2
            else:
                best[i][j] = max(best[i + 1][j], best[i][j - 1])

    left: list[str] = []
    lo, hi = 0, n - 1
    while True:
        if lo == hi:
            middle = text[lo]
            break
        if text[lo] == text[hi]:
            left.append(text[lo])
            if hi == lo + 1:
                middle = ""
                break
            lo += 1
            hi -= 1
        elif best[lo + 1][hi] > best[lo][hi - 1]:
            lo += 1
        else:
            hi -= 1
    outer = "".join(left)
    return outer + middle + outer[::-1]