"""Command line front end answering batches of queries read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from dpkit.bitmask import can_avoid_palindromes
from dpkit.knapsack import max_coins
from dpkit.palindromes import palindrome_sum_counts


def _next_int(tokens: Iterator[str]) -> int:
    token = _next_token(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _palindrome_sums(tokens: Iterator[str]) -> list[str]:
    queries = [_next_int(tokens) for _ in range(_next_int(tokens))]
    if any(n < 0 for n in queries):
        raise ValueError("queries must be non-negative")
    if not queries:
        return []
    counts = palindrome_sum_counts(max(queries) + 1)
    return [str(counts[n]) for n in queries]


def _coins(tokens: Iterator[str]) -> list[str]:
    lines = []
    for _ in range(_next_int(tokens)):
        n = _next_int(tokens)
        k = _next_int(tokens)
        targets = [_next_int(tokens) for _ in range(n)]
        values = [_next_int(tokens) for _ in range(n)]
        lines.append(str(max_coins(targets, values, k)))
    return lines


def _palindrome_free(tokens: Iterator[str]) -> list[str]:
    lines = []
    for case in range(1, _next_int(tokens) + 1):
        n = _next_int(tokens)
        s = _next_token(tokens)
        if len(s) != n:
            raise ValueError(f"case {case}: expected a string of length {n}")
        verdict = "POSSIBLE" if can_avoid_palindromes(s) else "IMPOSSIBLE"
        lines.append(f"Case #{case}: {verdict}")
    return lines


_COMMANDS: dict[str, tuple[Callable[[Iterator[str]], list[str]], str]] = {
    "palindrome-sums": (_palindrome_sums, "ways to write n as a sum of palindromes"),
    "coins": (_coins, "best coin total reachable within k operations"),
    "palindrome-free": (_palindrome_free, "fill '?' avoiding palindromes of length 5 and 6"),
}


def main(argv: list[str] | None = None) -> int:
    """Run one command over the queries on standard input; return the exit status."""
    parser = argparse.ArgumentParser(prog="dpkit", description="Answer dynamic programming queries.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    args = parser.parse_args(argv)

    handler, _ = _COMMANDS[args.command]
    tokens = iter(sys.stdin.read().split())
    try:
        lines = handler(tokens)
    except ValueError as exc:
        print(f"dpkit: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{line}\n" for line in lines))
    return 0