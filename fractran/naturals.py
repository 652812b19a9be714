from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Self, runtime_checkable

from fractran.config import runtime_settings
from fractran.errors import ArithmeticOverflow, UnrepresentableValue
from fractran.primes import prime_at


@runtime_checkable
class FractranNat(Protocol):
    """What a number must support to be a FRACTRAN state or fraction side.

    ``NativeNat`` and ``PrimeBasis`` both satisfy it; ``Fraction``, ``Program``
    and ``Evaluator`` are written only against this interface.
    """

    @classmethod
    def from_int(cls, n: int) -> Self: ...

    def __mul__(self, other: Self) -> Self: ...

    def try_divide(self, divisor: Self) -> Self | None: ...

    def prime_power(self, index: int = 0) -> int | None: ...

    def __int__(self) -> int: ...

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...


@dataclass(frozen=True, slots=True)
class NativeNat:
    """A positive integer confined to a fixed-width unsigned word.

    Python ints never wrap, so the width is enforced by explicit checks: a
    product past ``2**native_bits - 1`` raises ``ArithmeticOverflow``.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"NativeNat needs an int, got {type(self.value).__name__}")
        if self.value < 1:
            raise UnrepresentableValue(self.value, "FRACTRAN values must be positive")
        limit = runtime_settings().native_max
        if self.value > limit:
            raise UnrepresentableValue(self.value, f"exceeds native maximum {limit}")

    @classmethod
    def from_int(cls, n: int) -> NativeNat:
        return cls(n)

    def __mul__(self, other: NativeNat) -> NativeNat:
        if not isinstance(other, NativeNat):
            return NotImplemented
        product = self.value * other.value
        limit = runtime_settings().native_max
        if product > limit:
            raise ArithmeticOverflow(
                f"{self.value} * {other.value} overflows {runtime_settings().native_bits}-bit word",
                bound=limit,
            )
        return NativeNat(product)

    def try_divide(self, divisor: NativeNat) -> NativeNat | None:
        if self.value % divisor.value:
            return None
        return NativeNat(self.value // divisor.value)

    def prime_power(self, index: int = 0) -> int | None:
        p = prime_at(index)
        rest = self.value
        exp = 0
        while rest % p == 0:
            rest //= p
            exp += 1
        return exp if rest == 1 else None

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
