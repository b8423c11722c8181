"""Classic algorithms over sequences: LCS, LIS, monotonic stacks and KMP."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Any

_SEPARATOR = object()


def lcs_length(a: Sequence, b: Sequence) -> int:
    """Length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0]
        for j, y in enumerate(b):
            current.append(previous[j] + 1 if x == y else max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def lis_length(a: Sequence) -> int:
    """Length of the longest strictly increasing subsequence of ``a``."""
    tails: list = []
    for x in a:
        pos = bisect_left(tails, x)
        if pos == len(tails):
            tails.append(x)
        else:
            tails[pos] = x
    return len(tails)


def next_greater(a: Sequence) -> list:
    """For each element, the first strictly greater value to its right, else -1."""
    result: list[Any] = [-1] * len(a)
    stack: list[int] = []
    for i, x in enumerate(a):
        while stack and x > a[stack[-1]]:
            result[stack.pop()] = x
        stack.append(i)
    return result


def previous_greater(a: Sequence) -> list:
    """For each element, the nearest strictly greater value to its left, else -1."""
    result: list[Any] = [-1] * len(a)
    stack: list[int] = []
    for i in reversed(range(len(a))):
        while stack and a[i] > a[stack[-1]]:
            result[stack.pop()] = a[i]
        stack.append(i)
    return result


def next_smaller_index(a: Sequence) -> list[int]:
    """Index of the first strictly smaller element to the right, else ``len(a)``."""
    n = len(a)
    result = [n] * n
    stack: list[int] = []
    for i in reversed(range(n)):
        while stack and a[stack[-1]] >= a[i]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def previous_smaller_index(a: Sequence) -> list[int]:
    """Index of the nearest strictly smaller element to the left, else -1."""
    result = [-1] * len(a)
    stack: list[int] = []
    for i, x in enumerate(a):
        while stack and a[stack[-1]] >= x:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def compute_lps(s: Sequence) -> list[int]:
    """Longest proper prefix that is also a suffix, for every prefix of ``s``."""
    n = len(s)
    lps = [0] * n
    length, i = 0, 1
    while i < n:
        if s[i] == s[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Start positions of every (possibly overlapping) occurrence of ``pattern``."""
    m = len(pattern)
    if m == 0:
        raise ValueError("pattern must not be empty")
    combined = [*pattern, _SEPARATOR, *text]
    lps = compute_lps(combined)
    return [i - 2 * m for i in range(m + 1, len(combined)) if lps[i] == m]