from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import zip_longest

from fractran.config import runtime_settings
from fractran.errors import ArithmeticOverflow, UnrepresentableValue
from fractran.naturals import NativeNat
from fractran.primes import allowed_primes, prime_at


def _trim(exps: list[int]) -> tuple[int, ...]:
    end = len(exps)
    while end and exps[end - 1] == 0:
        end -= 1
    return tuple(exps[:end])


@dataclass(frozen=True, slots=True)
class PrimeBasis:
    """A positive integer stored as exponents of its prime factorization.

    ``exps[i]`` is the power of ``allowed_primes()[i]``, so ``(3, 0, 2)`` is
    2^3 * 5^2 = 200. Positions past the end are zero and the tuple never ends
    in a zero, which makes tuple equality the same as integer equality.
    Multiplication adds exponents and exact division subtracts them; memory
    follows the number of distinct primes touched, not the magnitude.
    """

    exps: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        exps = self.exps
        if exps and exps[-1] == 0:
            raise ValueError(f"exponent tuple must not end in zero: {exps!r}")
        if len(exps) > len(allowed_primes()):
            raise ValueError(f"needs more than {len(allowed_primes())} prime registers: {exps!r}")
        limit = runtime_settings().exponent_max
        for e in exps:
            if e < 0:
                raise ValueError(f"exponents must be non-negative: {exps!r}")
            if e > limit:
                raise UnrepresentableValue(e, f"exponent exceeds bound {limit}")

    @classmethod
    def from_int(cls, n: int) -> PrimeBasis:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"PrimeBasis needs an int, got {type(n).__name__}")
        if n < 1:
            raise UnrepresentableValue(n, "FRACTRAN values must be positive")

        table = allowed_primes()
        limit = runtime_settings().exponent_max
        exps: list[int] = []
        rest = n
        for i, p in enumerate(table):
            if rest == 1:
                break
            if p * p > rest:
                # What is left is a single prime; find its register directly.
                j = bisect_left(table, rest, lo=i)
                if j < len(table) and table[j] == rest:
                    exps.extend([0] * (j - i))
                    exps.append(1)
                    rest = 1
                break
            exp = 0
            while rest % p == 0:
                rest //= p
                exp += 1
            if exp > limit:
                raise UnrepresentableValue(n, f"power of {p} exceeds exponent bound {limit}")
            exps.append(exp)

        if rest != 1:
            raise UnrepresentableValue(n, f"has a prime factor larger than {table[-1]}")
        return cls(_trim(exps))

    @classmethod
    def from_exponents(cls, exps: Iterable[int]) -> PrimeBasis:
        return cls(_trim(list(exps)))

    def __mul__(self, other: PrimeBasis) -> PrimeBasis:
        if not isinstance(other, PrimeBasis):
            return NotImplemented
        limit = runtime_settings().exponent_max
        summed = [a + b for a, b in zip_longest(self.exps, other.exps, fillvalue=0)]
        for i, e in enumerate(summed):
            if e > limit:
                raise ArithmeticOverflow(
                    f"exponent of {prime_at(i)} would reach {e}, bound is {limit}",
                    bound=limit,
                )
        return PrimeBasis(_trim(summed))

    def try_divide(self, divisor: PrimeBasis) -> PrimeBasis | None:
        mine = self.exps
        theirs = divisor.exps
        # Canonical form: a longer divisor has a nonzero exponent where ours is zero.
        if len(theirs) > len(mine):
            return None
        for a, b in zip(mine, theirs):
            if a < b:
                return None
        diff = [a - b for a, b in zip(mine, theirs)]
        diff.extend(mine[len(theirs) :])
        return PrimeBasis(_trim(diff))

    def prime_power(self, index: int = 0) -> int | None:
        prime_at(index)
        for i, e in enumerate(self.exps):
            if e and i != index:
                return None
        return self.exps[index] if index < len(self.exps) else 0

    def value(self) -> int:
        return math.prod(p**e for p, e in zip(allowed_primes(), self.exps))

    def __int__(self) -> int:
        return self.value()

    def to_native(self) -> NativeNat:
        value = self.value()
        limit = runtime_settings().native_max
        if value > limit:
            raise ArithmeticOverflow(f"{self} does not fit a native word", bound=limit)
        return NativeNat(value)

    def __str__(self) -> str:
        parts = [f"{p}^{e}" for p, e in zip(allowed_primes(), self.exps) if e]
        if not parts:
            return "PrimeBasis(1)"
        return f"PrimeBasis({' × '.join(parts)})"
