"""Modular arithmetic helpers: extended gcd, inverses, powers and binomials."""

from __future__ import annotations


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` where ``d = gcd(a, b)`` and ``a*x + b*y == d``."""
    if b == 0:
        return a, 1, 0
    d, x1, y1 = ext_gcd(b, a % b)
    return d, y1, x1 - y1 * (a // b)


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m`` (0 when ``m`` is 1)."""
    if m < 1:
        raise ValueError("modulus must be positive")
    if m == 1:
        return 0
    d, x, _ = ext_gcd(a % m, m)
    if d != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def power(a: int, b: int, mod: int) -> int:
    """Compute ``a ** b`` modulo ``mod`` by repeated squaring."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if mod < 1:
        raise ValueError("modulus must be positive")
    result = 1
    base = a % mod
    while b:
        if b & 1:
            result = result * base % mod
        base = base * base % mod
        b >>= 1
    return result


class Factorials:
    """Factorials and inverse factorials up to ``limit`` modulo a prime."""

    def __init__(self, limit: int, modulus: int) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if modulus < 2:
            raise ValueError("modulus must be a prime")
        self.limit = limit
        self.modulus = modulus
        fact = [1 % modulus]
        for i in range(1, limit + 1):
            fact.append(fact[-1] * i % modulus)
        inverse = [0] * (limit + 1)
        inverse[limit] = power(fact[limit], modulus - 2, modulus)
        for i in range(limit, 0, -1):
            inverse[i - 1] = inverse[i] * i % modulus
        self._fact = fact
        self._inverse = inverse

    def ncr(self, n: int, r: int) -> int:
        """Return ``C(n, r)`` modulo the modulus; 0 when ``r`` is out of range."""
        if not 0 <= n <= self.limit:
            raise ValueError(f"n must lie in 0..{self.limit}")
        if r < 0 or r > n:
            return 0
        m = self.modulus
        return self._fact[n] * self._inverse[r] % m * self._inverse[n - r] % m