# algodrills

Compact solutions to well-known programming exercises: array and string
classics, a book-allocation binary search, and a handful of short contest
problems. Every function takes ordinary Python values and returns a result,
leaving its arguments unchanged.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library

### Arrays (`algodrills.arrays`)

```python
from algodrills.arrays import (
    max_subarray_sum, max_product_subarray, find_majority, next_permutation,
    second_largest, smallest_missing_positive, find_split, max_profit_once,
)

max_subarray_sum([2, 3, -8, 7, -1, 2, 3])          # 11
max_product_subarray([-2, 6, -3, -10, 0, 2])       # 180
find_majority([1, 2, 3, 1, 1, 2, 3, 3, 3])         # [3]
next_permutation([1, 2, 3])                        # [1, 3, 2]
second_largest([10, 20, 4, 45, 99])                # 45
smallest_missing_positive([5, 3, 2, 5, 1])         # 4
find_split([1, 3, 4, 0, 4])                        # (1, 2)
max_profit_once([7, 1, 5, 3, 6, 4])                # 5
```

Also available:

- `max_circular_subarray_sum(values)` – best subarray sum allowing wrap-around.
- `min_height_difference(heights, k)` – smallest spread after moving every
  height up or down by `k`, never below zero.
- `reverse_array(values)` and `rotate_left(values, d)`.
- `max_profit_many(prices)` – best profit from any number of trades.

`find_majority` returns values occurring more than `len(values) // 3` times,
in ascending order. `second_largest` returns `-1` when there is no value
strictly below the maximum, and `find_split` returns `(-1, -1)` when no
three-way equal-sum split exists. The sum and product functions and
`min_height_difference` raise `ValueError` on empty input.

### Strings (`algodrills.strings`)

```python
from algodrills.strings import (
    add_binary, are_anagrams, fizz_buzz, atoi, first_non_repeating, kmp_search,
)

add_binary("1010", "1011")                 # "10101"
are_anagrams("listen", "silent")           # True
fizz_buzz(5)                               # ["1", "2", "Fizz", "4", "Buzz"]
atoi("  -42")                              # -42
first_non_repeating("abcabc")              # None
kmp_search("aaba", "aabaacaadaabaaba")     # [0, 9, 12]
```

`atoi` skips leading spaces, reads one optional sign and then digits, and
clamps to the 32-bit signed range. `prefix_function(pattern)` returns the
longest-proper-border table that `kmp_search` uses; `kmp_search` raises
`ValueError` for an empty pattern.

### Page allocation (`algodrills.pages`)

```python
from algodrills.pages import can_allocate, min_max_pages

min_max_pages([10, 20, 30, 40], 2)   # 60
can_allocate([10, 20, 30, 40], 2, 50)  # False
```

`min_max_pages` raises `ValueError` when there are no books, no students, or
fewer books than students.

### Contest problems (`algodrills.contest`)

`bit_plus_plus`, `domino_piling`, `elephant_steps`, `meeting_distance`,
`next_round_count`, `problem_difficulty`, `soft_drink_toasts`,
`team_solvable`, `can_make_equal`, `capitalize_word`, `is_sorted` and
`halloumi_sortable`.

```python
from algodrills.contest import bit_plus_plus, elephant_steps, can_make_equal

bit_plus_plus(["X++", "--X", "X++"])   # 1
elephant_steps(12)                     # 3
can_make_equal([1, 4, 2, 1])           # False
```

## Command line

The `algodrills` command solves the contest problems. It reads the problem's
whitespace-separated input from standard input and prints the answer:

```
printf '3\nX++\n--X\nX++\n' | algodrills bits
```

prints `1`. The problems are `bits`, `capitalize`, `difficulty`, `domino`,
`elephant`, `halloumi`, `meeting`, `next-round`, `soft-drink`, `team` and
`transfusion`; `transfusion` and `halloumi` read a number of test cases and
print `YES` or `NO` for each. Malformed or short input prints an `error:`
message to standard error and exits with status 1.

```
algodrills --help
```

lists the problems.

The array, string and page-allocation functions are available from Python
only; the command does not cover them.