"""Modular arithmetic, combinatorics and primality helpers."""

from __future__ import annotations

import math
from itertools import accumulate, combinations, takewhile

MOD = 1_000_000_007
_MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def big_pow(a: int, b: int, mod: int = MOD) -> int:
    """Compute ``a ** b % mod`` by binary exponentiation; 1 when ``b <= 0``."""
    result = 1
    while b > 0:
        if b & 1:
            result = result * a % mod
        a = a * a % mod
        b >>= 1
    return result


def mod_inverse(a: int, m: int = MOD) -> int:
    """Inverse of ``a`` modulo the prime ``m`` by Fermat's little theorem."""
    return big_pow(a, m - 2, m)


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, with multiplicity."""
    factors = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 1
    if n > 1:
        factors.append(n)
    return factors


def count_coprime(x: int, g: int, k: int) -> int:
    """Count ``m`` in ``[1, k // g]`` that are coprime to ``x // g``."""
    limit = k // g
    primes = list(dict.fromkeys(prime_factors(x // g)))
    non_coprime = 0
    for size in range(1, len(primes) + 1):
        sign = 1 if size % 2 else -1
        for combo in combinations(primes, size):
            lcm = math.prod(combo)
            if lcm <= limit:
                non_coprime += sign * (limit // lcm)
    return limit - non_coprime


def derangements(n: int) -> list[int]:
    """Numbers of derangements of 0..n elements."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = [1, 0]
    for i in range(2, n + 1):
        table.append((i - 1) * (table[-1] + table[-2]))
    return table[: n + 1]


class FactorialTable:
    """Factorials modulo ``mod`` up to ``n``, with binomial coefficients."""

    def __init__(self, n: int, mod: int = MOD) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.mod = mod
        self.values = list(accumulate(range(1, n + 1), lambda acc, i: acc * i % mod, initial=1))

    def n_cr(self, n: int, r: int) -> int:
        """Binomial coefficient ``C(n, r)`` modulo the table's prime."""
        if r > n or r < 0:
            return 0
        if n >= len(self.values):
            raise ValueError(f"n={n} exceeds the table limit {len(self.values) - 1}")
        denominator = self.values[r] * self.values[n - r] % self.mod
        return self.values[n] * mod_inverse(denominator, self.mod) % self.mod


def log_factorials(n: int = 10005) -> list[float]:
    """Natural logarithms of ``0!`` through ``(n - 1)!``."""
    if n < 1:
        raise ValueError("n must be positive")
    return list(accumulate((math.log(i) for i in range(1, n)), initial=0.0))


def miller_test(n: int, a: int) -> bool:
    """One Miller-Rabin round of ``n`` with witness ``a``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if n % a == 0:
        return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    x = pow(a, d, n)
    if x in (1, n - 1):
        return True
    for _ in range(1, s):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin primality test for 64-bit integers."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    return all(miller_test(n, a) for a in takewhile(lambda a: a < n, _MILLER_RABIN_BASES))


def phi(n: int) -> int:
    """Euler's totient function."""
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def sieve(limit: int = 5000) -> list[bool]:
    """Primality flags for ``0..limit`` by the sieve of Eratosthenes."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    flags = [True] * (limit + 1)
    flags[:2] = [False] * min(2, limit + 1)
    i = 2
    while i * i <= limit:
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
        i += 1
    return flags