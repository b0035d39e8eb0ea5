"""Solutions to short contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Return the value of x after running statements such as ``X++`` or ``--X``.

    x starts at zero; a statement whose second character is ``+`` increments
    it, any other statement decrements it.
    """
    total = 0
    for statement in statements:
        if len(statement) < 2:
            raise ValueError(f"malformed statement: {statement!r}")
        total += 1 if statement[1] == "+" else -1
    return total


def domino_piling(m: int, n: int) -> int:
    """Return how many 2x1 dominoes fit on an m by n board."""
    return (m * n) // 2


def elephant_steps(n: int) -> int:
    """Return the fewest steps of length 1 to 5 needed to cover distance n."""
    quotient, remainder = divmod(n, 5)
    return quotient + (remainder != 0)


def meeting_distance(a: int, b: int, c: int) -> int:
    """Return the total distance three friends on a line walk to meet."""
    return max(a, b, c) - min(a, b, c)


def next_round_count(scores: Sequence[int], k: int) -> int:
    """Count participants who advance, given scores sorted in descending order.

    A participant advances with a positive score at least as high as the
    score of the k-th place (1-based).
    """
    scores = list(scores)
    if not 1 <= k <= len(scores):
        raise ValueError(f"k must lie between 1 and {len(scores)}, got {k}")
    cutoff = scores[k - 1]
    return sum(1 for score in scores if score >= cutoff and score > 0)


def problem_difficulty(opinions: Iterable[int]) -> str:
    """Return ``"HARD"`` if anyone answered 1, otherwise ``"EASY"``."""
    hard_votes = 0
    for opinion in opinions:
        if opinion == 1:
            hard_votes += 1
    return "HARD" if hard_votes > 0 else "EASY"


def soft_drink_toasts(
    n: int, k: int, l: int, c: int, d: int, p: int, nl: int, np: int
) -> int:
    """Return how many toasts each of n friends can make.

    There are k bottles of l millilitres, c limes cut into d slices and p grams
    of salt; each toast takes nl millilitres, one slice and np grams of salt.
    """
    drink_toasts = (k * l) // nl
    lime_slices = c * d
    salt_toasts = p // np
    return min(drink_toasts, lime_slices, salt_toasts) // n


def team_solvable(problems: Iterable[Sequence[int]]) -> int:
    """Count problems for which at least two of the three friends are sure."""
    return sum(1 for votes in problems if sum(votes) >= 2)


def can_make_equal(values: Sequence[int]) -> bool:
    """Tell whether moving water only rightwards can make all vessels equal."""
    values = list(values)
    if not values:
        raise ValueError("at least one value is required")
    total = sum(values)
    if total % len(values) != 0:
        return False
    target = total // len(values)
    return all(surplus >= 0 for surplus in accumulate(v - target for v in values))


def capitalize_word(word: str) -> str:
    """Return the word with its first letter in upper case, the rest untouched."""
    return word[:1].upper() + word[1:]


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether the values are in non-decreasing order."""
    return all(left <= right for left, right in pairwise(values))


def halloumi_sortable(values: Sequence[int], k: int) -> bool:
    """Tell whether boxes can be sorted by reversing subarrays of length up to k."""
    return k >= 2 or is_sorted(values)