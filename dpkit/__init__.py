"""Dynamic-programming solvers, number-theory and tree helpers, and a command line front end."""

__version__ = "0.1.0"

__all__ = [
    "binary_lifting",
    "bitmask",
    "cli",
    "counting",
    "digit_dp",
    "knapsack",
    "modular",
    "palindromes",
    "segtree",
]