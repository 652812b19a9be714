from __future__ import annotations

import logging
import math
from functools import lru_cache

from fractran.config import runtime_settings

_logger = logging.getLogger(__name__)


def _sieve_bound(n: int) -> int:
    # p_n < n(ln n + ln ln n) for n >= 6; p_5 = 11 covers the rest.
    if n < 6:
        return 11
    return math.floor(n * (math.log(n) + math.log(math.log(n))))


def first_n_primes(n: int) -> list[int]:
    """Return the first ``n`` primes in ascending order (sieve of Eratosthenes)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return []

    bound = _sieve_bound(n)
    is_prime = bytearray([1]) * (bound + 1)
    is_prime[0] = is_prime[1] = 0
    for i in range(2, math.isqrt(bound) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = b"\x00" * ((bound - i * i) // i + 1)

    primes: list[int] = []
    for i, flag in enumerate(is_prime):
        if flag:
            primes.append(i)
            if len(primes) == n:
                break
    return primes


@lru_cache(maxsize=1)
def allowed_primes() -> tuple[int, ...]:
    """The process-wide table of primes a factorized value may use."""
    count = runtime_settings().max_regs
    table = tuple(first_n_primes(count))
    _logger.debug("built prime table: %d primes, largest %d", len(table), table[-1])
    return table


def prime_at(index: int) -> int:
    table = allowed_primes()
    if not 0 <= index < len(table):
        raise IndexError(f"prime index {index} outside table of {len(table)} primes")
    return table[index]
