"""Classic string problems."""

from __future__ import annotations

from collections import Counter

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_DIGITS = "0123456789"


def add_binary(a: str, b: str) -> str:
    """Return the sum of two binary strings, without leading zeros.

    A zero sum gives ``"0"``; two empty strings give an empty string.
    """
    if not a and not b:
        return ""
    return format(int(a or "0", 2) + int(b or "0", 2), "b")


def are_anagrams(a: str, b: str) -> bool:
    """Tell whether the two strings hold the same characters equally often."""
    return len(a) == len(b) and sorted(a) == sorted(b)


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz words for 1 to n."""
    words = ((3, "Fizz"), (5, "Buzz"))
    return [
        "".join(word for divisor, word in words if i % divisor == 0) or str(i)
        for i in range(1, n + 1)
    ]


def atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does, clamped to 32 bits.

    Leading spaces are skipped, one optional sign is read, then decimal digits
    up to the first other character. No digits give 0.
    """
    stripped = text.lstrip(" ")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
        if sign == 1 and result > _INT_MAX:
            return _INT_MAX
        if sign == -1 and -result < _INT_MIN:
            return _INT_MIN
    return sign * result


def first_non_repeating(text: str) -> str | None:
    """Return the first character occurring exactly once, or None."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def prefix_function(pattern: str) -> list[int]:
    """Return, for each prefix, the length of its longest proper border."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return the start indices of every, possibly overlapping, match."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches: list[int] = []
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                matches.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return matches