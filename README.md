# dpkit

A small collection of dynamic-programming solvers and the number-theory and
data-structure helpers they rely on. Pure Python, no third-party dependencies.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dpkit.modular` | `ext_gcd`, `mod_inverse`, `power`, and `Factorials` for binomial coefficients modulo a prime |
| `dpkit.segtree` | `MaxSegmentTree`: point assignment, maximum over half-open ranges |
| `dpkit.binary_lifting` | `BinaryLifting`: k-th ancestor queries on a parent array (roots have parent `-1`) |
| `dpkit.palindromes` | `palindromic_numbers`, `palindrome_sum_counts`, `count_palindrome_sums`, `min_removals_even_pairs` |
| `dpkit.counting` | `count_good_subsequences`, `count_winning_arrays` |
| `dpkit.knapsack` | `min_total_cost`, `operation_costs`, `max_coins` |
| `dpkit.bitmask` | `connect_two_groups`, `count_domino_tilings`, `can_avoid_palindromes` |
| `dpkit.digit_dp` | `count_interesting`, `count_no_adjacent_equal` |
| `dpkit.cli` | `main`, the `dpkit` command |

## Library use

```python
from dpkit.modular import Factorials, power
from dpkit.segtree import MaxSegmentTree
from dpkit.bitmask import count_domino_tilings

power(2, 10, 1000)                      # 24

table = Factorials(10, 1_000_000_007)
table.ncr(5, 2)                         # 10

tree = MaxSegmentTree(8)
tree.update(3, 7)
tree.update(5, 4)
tree.query(0, 8)                        # 7

count_domino_tilings(2, 2)              # 2
```

Counting functions return their results reduced by the modulus the problem
fixes (`1_000_000_007` or `998_244_353`); invalid arguments raise
`ValueError`, and out-of-range indices in the tree classes raise `IndexError`.

## Command line

Installing the package provides a `dpkit` command. It takes one sub-command,
reads whitespace-separated input from standard input and writes one answer
per line:

| Sub-command | Input | Output |
| --- | --- | --- |
| `palindrome-sums` | `t`, then `t` integers `n` | ways to write each `n` as a sum of palindromes, modulo `1_000_000_007` |
| `coins` | `t`, then per case `n k`, `n` targets (1..1023), `n` values | best total of values reachable within `k` operations |
| `palindrome-free` | `t`, then per case `n` and a string of `0`, `1`, `?` of length `n` | `Case #i: POSSIBLE` or `Case #i: IMPOSSIBLE` |

```
echo "2 5 10" | dpkit palindrome-sums
```

Malformed input prints a message starting with `dpkit:` to standard error and
exits with status 1. To list the sub-commands:

```
dpkit --help
```

## Limitations

Only the three problems above are available from the command line; the other
solvers, and the modular, segment-tree and binary-lifting helpers, are
reachable only by importing them.