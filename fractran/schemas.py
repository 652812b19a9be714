from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fractran.fraction import Fraction
from fractran.naturals import FractranNat
from fractran.primebasis import PrimeBasis
from fractran.program import Program


class FractionSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    numerator: int = Field(ge=1)
    denominator: int = Field(ge=1)

    @model_validator(mode="before")
    @classmethod
    def _accept_pair(cls, v: Any) -> Any:
        # Callers usually hold fractions as plain (num, denom) pairs.
        if isinstance(v, (list, tuple)):
            if len(v) != 2:
                raise ValueError("fraction pair must have exactly two items")
            return {"numerator": v[0], "denominator": v[1]}
        return v

    def build(self, *, nat: type[FractranNat] = PrimeBasis) -> Fraction:
        return Fraction.from_ints(self.numerator, self.denominator, nat=nat)


class ProgramSpec(BaseModel):
    fractions: list[FractionSpec] = Field(min_length=1)

    def pairs(self) -> list[tuple[int, int]]:
        return [(f.numerator, f.denominator) for f in self.fractions]

    def build(self, *, nat: type[FractranNat] = PrimeBasis) -> Program:
        return Program(f.build(nat=nat) for f in self.fractions)
