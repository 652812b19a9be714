from __future__ import annotations

import pytest
from pydantic import ValidationError

from fractran.naturals import NativeNat
from fractran.primebasis import PrimeBasis
from fractran.schemas import FractionSpec, ProgramSpec
from tests.helpers import PRIMEGAME


def test_program_spec_accepts_pairs_and_mappings() -> None:
    spec = ProgramSpec.model_validate(
        {"fractions": [[17, 91], (78, 85), {"numerator": 1, "denominator": 17}]}
    )
    assert spec.pairs() == [(17, 91), (78, 85), (1, 17)]


def test_program_spec_builds_program() -> None:
    program = ProgramSpec(fractions=PRIMEGAME).build(nat=NativeNat)
    assert len(program) == len(PRIMEGAME)
    assert program.fractions[0].numerator == NativeNat(17)
    assert program.fractions[-1].denominator == NativeNat(1)

    default = ProgramSpec(fractions=PRIMEGAME).build()
    assert default.fractions[1].numerator == PrimeBasis.from_int(78)


@pytest.mark.parametrize(
    "raw",
    [
        {"fractions": []},
        {"fractions": [[1, 0]]},
        {"fractions": [[0, 3]]},
        {"fractions": [[1, 2, 3]]},
        {"fractions": [{"numerator": 1}]},
    ],
)
def test_program_spec_rejects_invalid(raw: dict) -> None:
    with pytest.raises(ValidationError):
        ProgramSpec.model_validate(raw)


def test_fraction_spec_is_frozen() -> None:
    spec = FractionSpec(numerator=3, denominator=2)
    with pytest.raises(ValidationError):
        spec.numerator = 5  # type: ignore[misc]
