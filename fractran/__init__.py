from __future__ import annotations

from fractran.config import FractranSettings, load_settings, runtime_settings
from fractran.errors import (
    ArithmeticOverflow,
    FractranError,
    InvalidFraction,
    InvalidProgram,
    StepLimitExceeded,
    UnrepresentableValue,
)
from fractran.fraction import Fraction
from fractran.naturals import FractranNat, NativeNat
from fractran.primebasis import PrimeBasis
from fractran.primes import allowed_primes, first_n_primes
from fractran.program import Evaluator, Program, RunResult, StepOutcome, StepStatus, run
from fractran.schemas import FractionSpec, ProgramSpec

__all__ = [
    "__version__",
    # Numbers
    "FractranNat",
    "NativeNat",
    "PrimeBasis",
    "allowed_primes",
    "first_n_primes",
    # Programs
    "Fraction",
    "Program",
    "Evaluator",
    "StepOutcome",
    "StepStatus",
    "RunResult",
    "run",
    # Schemas
    "FractionSpec",
    "ProgramSpec",
    # Settings
    "FractranSettings",
    "load_settings",
    "runtime_settings",
    # Errors
    "FractranError",
    "UnrepresentableValue",
    "ArithmeticOverflow",
    "InvalidFraction",
    "InvalidProgram",
    "StepLimitExceeded",
]

__version__ = "0.1.0"
