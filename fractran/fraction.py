from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from fractran.errors import InvalidFraction
from fractran.naturals import FractranNat
from fractran.primebasis import PrimeBasis

N = TypeVar("N", bound=FractranNat)


@dataclass(frozen=True, slots=True)
class Fraction(Generic[N]):
    """One FRACTRAN instruction: a positive ``numerator / denominator``."""

    numerator: N
    denominator: N

    def __post_init__(self) -> None:
        if type(self.numerator) is not type(self.denominator):
            raise InvalidFraction(
                "numerator and denominator must use the same representation, got "
                f"{type(self.numerator).__name__} and {type(self.denominator).__name__}"
            )
        if int(self.numerator) == 0 or int(self.denominator) == 0:
            raise InvalidFraction("cannot have a fraction with zero on either side")

    @classmethod
    def from_ints(
        cls, numerator: int, denominator: int, *, nat: type[FractranNat] = PrimeBasis
    ) -> Fraction:
        return cls(nat.from_int(numerator), nat.from_int(denominator))

    def apply(self, state: N) -> N | None:
        # Quotient first, so `state * numerator` never needs extra headroom.
        quotient = state.try_divide(self.denominator)
        if quotient is None:
            return None
        return quotient * self.numerator

    def __str__(self) -> str:
        return f"{self.numerator} / {self.denominator}"
