import pytest

from algodrills.strings import (
    add_binary,
    are_anagrams,
    atoi,
    first_non_repeating,
    fizz_buzz,
    kmp_search,
    prefix_function,
)


def test_add_binary_worked_example():
    assert add_binary("1010", "1011") == "10101"


@pytest.mark.parametrize(
    "a, b",
    [("1", "1"), ("0011", "1"), ("111", "1"), ("1101", "0"), ("0", "100000")],
)
def test_add_binary_matches_integer_sum(a, b):
    result = add_binary(a, b)
    assert int(result, 2) == int(a, 2) + int(b, 2)
    assert result == "0" or not result.startswith("0")


def test_add_binary_zero():
    assert add_binary("000", "0") == "0"


def test_add_binary_is_symmetric():
    assert add_binary("1011", "111") == add_binary("111", "1011")


def test_add_binary_rejects_non_binary():
    with pytest.raises(ValueError):
        add_binary("12", "1")


def test_anagrams():
    assert are_anagrams("listen", "silent")
    assert not are_anagrams("hello", "world")
    assert not are_anagrams("abc", "abcc")
    assert are_anagrams("", "")


def test_fizz_buzz_words():
    words = fizz_buzz(20)
    assert len(words) == 20
    assert words[0] == "1"
    assert words[2] == "Fizz"
    assert words[4] == "Buzz"
    assert words[14] == "FizzBuzz"


def test_fizz_buzz_invariants():
    for i, word in enumerate(fizz_buzz(60), start=1):
        assert word.startswith("Fizz") == (i % 3 == 0)
        assert word.endswith("Buzz") == (i % 5 == 0)
        if i % 3 and i % 5:
            assert word == str(i)


def test_fizz_buzz_empty():
    assert fizz_buzz(0) == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -42", -42),
        ("1337c0d3", 1337),
        ("+7x9", 7),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("2147483648", 2147483647),
        ("-2147483649", -2147483648),
        ("-91283472332", -2147483648),
        ("  0012", 12),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_first_non_repeating():
    assert first_non_repeating("geeksforgeeks") == "f"
    assert first_non_repeating("abcabc") is None
    assert first_non_repeating("z") == "z"


@pytest.mark.parametrize("pattern", ["aaaa", "aabaaab", "abcabd", "abab", "x"])
def test_prefix_function_borders(pattern):
    lps = prefix_function(pattern)
    assert len(lps) == len(pattern)
    assert lps[0] == 0
    for i, length in enumerate(lps):
        assert length <= i
        assert pattern[:length] == pattern[i + 1 - length : i + 1]


def test_kmp_worked_example():
    assert kmp_search("aaba", "aabaacaadaabaaba") == [0, 9, 12]


@pytest.mark.parametrize(
    "pattern, text",
    [("aa", "aaaaa"), ("ab", "abababab"), ("abc", "xyz"), ("a", "banana")],
)
def test_kmp_matches_are_real_and_complete(pattern, text):
    matches = kmp_search(pattern, text)
    assert all(text[i : i + len(pattern)] == pattern for i in matches)
    assert matches == sorted(set(matches))
    assert len(matches) == sum(
        1 for start in range(len(text)) if text.startswith(pattern, start)
    )


def test_kmp_empty_pattern_raises():
    with pytest.raises(ValueError):
        kmp_search("", "abc")