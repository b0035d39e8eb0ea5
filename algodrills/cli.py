"""Command line that solves contest problems from whitespace-separated input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from algodrills.contest import (
    bit_plus_plus,
    can_make_equal,
    capitalize_word,
    domino_piling,
    elephant_steps,
    halloumi_sortable,
    meeting_distance,
    next_round_count,
    problem_difficulty,
    soft_drink_toasts,
    team_solvable,
)


class _Tokens:
    """Reads whitespace-separated tokens one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _verdicts(flags: Iterable[bool]) -> list[str]:
    """Turn each flag into the ``YES``/``NO`` line the problems print."""
    return ["YES" if flag else "NO" for flag in flags]


def _bits(tokens: _Tokens) -> list[str]:
    count = tokens.number()
    return [str(bit_plus_plus([tokens.word() for _ in range(count)]))]


def _domino(tokens: _Tokens) -> list[str]:
    m, n = tokens.numbers(2)
    return [str(domino_piling(m, n))]


def _elephant(tokens: _Tokens) -> list[str]:
    return [str(elephant_steps(tokens.number()))]


def _meeting(tokens: _Tokens) -> list[str]:
    return [str(meeting_distance(*tokens.numbers(3)))]


def _next_round(tokens: _Tokens) -> list[str]:
    n, k = tokens.numbers(2)
    return [str(next_round_count(tokens.numbers(n), k))]


def _difficulty(tokens: _Tokens) -> list[str]:
    count = tokens.number()
    return [problem_difficulty(tokens.numbers(count))]


def _soft_drink(tokens: _Tokens) -> list[str]:
    return [str(soft_drink_toasts(*tokens.numbers(8)))]


def _team(tokens: _Tokens) -> list[str]:
    count = tokens.number()
    return [str(team_solvable([tokens.numbers(3) for _ in range(count)]))]


def _transfusion(tokens: _Tokens) -> list[str]:
    cases = tokens.number()
    flags = []
    for _ in range(cases):
        n = tokens.number()
        flags.append(can_make_equal(tokens.numbers(n)))
    return _verdicts(flags)


def _capitalize(tokens: _Tokens) -> list[str]:
    return [capitalize_word(tokens.word())]


def _halloumi(tokens: _Tokens) -> list[str]:
    cases = tokens.number()
    flags = []
    for _ in range(cases):
        n, k = tokens.numbers(2)
        flags.append(halloumi_sortable(tokens.numbers(n), k))
    return _verdicts(flags)


_SOLVERS: dict[str, Callable[[_Tokens], list[str]]] = {
    "bits": _bits,
    "domino": _domino,
    "elephant": _elephant,
    "meeting": _meeting,
    "next-round": _next_round,
    "difficulty": _difficulty,
    "soft-drink": _soft_drink,
    "team": _team,
    "transfusion": _transfusion,
    "capitalize": _capitalize,
    "halloumi": _halloumi,
}


def solve(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the output lines."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return "\n".join(solver(_Tokens(text)))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="algodrills", description="Solve a contest problem read from standard input."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())