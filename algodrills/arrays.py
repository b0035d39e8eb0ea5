"""Classic array problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import pairwise


def _kadane(values: Sequence[int]) -> int:
    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not values:
        raise ValueError("at least one value is required")
    best = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    return best


def find_majority(values: Sequence[int]) -> list[int]:
    """Return, in ascending order, the values occurring more than n // 3 times."""
    threshold = len(values) // 3
    counts = Counter(values)
    return sorted(value for value, count in counts.items() if count > threshold)


def max_circular_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty subarray that may wrap around."""
    values = list(values)
    if not values:
        raise ValueError("at least one value is required")
    non_circular = _kadane(values)
    circular = sum(values) + _kadane([-value for value in values])
    if circular == 0:
        return non_circular
    return max(non_circular, circular)


def max_product_subarray(values: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    if not values:
        raise ValueError("at least one value is required")
    prefix = suffix = 1
    best = None
    for forward, backward in zip(values, reversed(values)):
        prefix = (prefix or 1) * forward
        suffix = (suffix or 1) * backward
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    return best


def min_height_difference(heights: Sequence[int], k: int) -> int:
    """Return the smallest spread after raising or lowering every height by k.

    No height may become negative.
    """
    if not heights:
        raise ValueError("at least one height is required")
    ordered = sorted(heights)
    if len(ordered) == 1:
        return 0
    lowest, highest = ordered[0], ordered[-1]
    best = highest - lowest
    for previous, current in pairwise(ordered):
        if current >= k:
            top = max(previous + k, highest - k)
            bottom = min(lowest + k, current - k)
            best = min(best, top - bottom)
    return best


def next_permutation(values: Sequence[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping to ascending order."""
    result = list(values)
    i = len(result) - 2
    while i >= 0 and result[i] >= result[i + 1]:
        i -= 1
    if i >= 0:
        j = len(result) - 1
        while result[j] <= result[i]:
            j -= 1
        result[i], result[j] = result[j], result[i]
    result[i + 1:] = reversed(result[i + 1:])
    return result


def reverse_array(values: Sequence[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(reversed(values))


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """Return the values rotated left by d places."""
    values = list(values)
    if not values:
        return []
    d %= len(values)
    return values[d:] + values[:d]


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if there is none."""
    if len(values) < 2:
        return -1
    largest = second = None
    for value in values:
        if largest is None or value > largest:
            second, largest = largest, value
        elif value != largest and (second is None or value > second):
            second = value
    return -1 if second is None else second


def smallest_missing_positive(values: Sequence[int]) -> int:
    """Return the smallest positive integer absent from the values."""
    present = {value for value in values if value > 0}
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def find_split(values: Sequence[int]) -> tuple[int, int]:
    """Return end indices (i, j) splitting the values into three equal-sum parts.

    Returns (-1, -1) when no split with a non-empty third part exists.
    """
    total = sum(values)
    if total % 3 != 0:
        return (-1, -1)
    third = total // 3
    ends: list[int] = []
    running = 0
    last = len(values) - 1
    for index, value in enumerate(values):
        running += value
        if running == third:
            running = 0
            ends.append(index)
            if len(ends) == 2 and index < last:
                return (ends[0], ends[1])
    return (-1, -1)


def max_profit_many(prices: Sequence[int]) -> int:
    """Return the best profit from any number of buy-then-sell trades."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def max_profit_once(prices: Sequence[int]) -> int:
    """Return the best profit from a single buy followed by a sell."""
    best = 0
    cheapest = None
    for price in prices:
        if cheapest is None or price <= cheapest:
            cheapest = price
        else:
            best = max(best, price - cheapest)
    return best