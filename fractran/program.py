from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from fractran.errors import ArithmeticOverflow, InvalidProgram, StepLimitExceeded
from fractran.fraction import Fraction
from fractran.naturals import FractranNat
from fractran.primebasis import PrimeBasis

N = TypeVar("N", bound=FractranNat)

_logger = logging.getLogger(__name__)


class StepStatus(str, Enum):
    ADVANCED = "advanced"
    HALTED = "halted"
    FAILED = "failed"


@dataclass(frozen=True)
class StepOutcome(Generic[N]):
    status: StepStatus
    value: N | None = None
    fraction_index: int | None = None
    error: ArithmeticOverflow | None = None

    @property
    def advanced(self) -> bool:
        return self.status == StepStatus.ADVANCED


@dataclass(frozen=True)
class RunResult(Generic[N]):
    final: N
    steps: int
    halted: bool


@dataclass(frozen=True, init=False)
class Program(Generic[N]):
    """An ordered list of fractions; index order decides which one fires."""

    fractions: tuple[Fraction[N], ...]

    def __init__(self, fractions: Iterable[Fraction[N]]) -> None:
        fracs = tuple(fractions)
        if not fracs:
            raise InvalidProgram("cannot run an empty program")
        for f in fracs:
            if not isinstance(f, Fraction):
                raise InvalidProgram(f"program entries must be Fraction, got {type(f).__name__}")
        object.__setattr__(self, "fractions", fracs)

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[int, int]], *, nat: type[FractranNat] = PrimeBasis
    ) -> Program:
        return cls(Fraction.from_ints(num, denom, nat=nat) for num, denom in pairs)

    def __len__(self) -> int:
        return len(self.fractions)

    def lazy_exec(self, initial: N) -> Evaluator[N]:
        """Return a cursor that runs this program from ``initial`` one step per pull."""
        return Evaluator(self, initial)

    def exec_to_completion(self, initial: N, *, max_steps: int | None = None) -> N:
        """Run until the program halts and return the last state.

        Never returns for a program that does not halt unless ``max_steps``
        is set, in which case ``StepLimitExceeded`` is raised.
        """
        result = run(self, initial, max_steps=max_steps)
        if not result.halted:
            raise StepLimitExceeded(result.steps)
        return result.final

    def __str__(self) -> str:
        return ", ".join(str(f) for f in self.fractions)


class Evaluator(Generic[N]):
    """Pull-based execution of a program.

    Each ``step()`` applies the first fraction that yields an integer and
    reports what happened; iterating yields the successive states and stops
    when the program halts. A step that overflows leaves ``current`` as it
    was and puts the cursor in a failed state that re-raises on every pull.
    """

    def __init__(self, program: Program[N], initial: N) -> None:
        self._program = program
        self._current = initial
        self._steps = 0
        self._status = StepStatus.ADVANCED
        self._error: ArithmeticOverflow | None = None

    @property
    def program(self) -> Program[N]:
        return self._program

    @property
    def current(self) -> N:
        return self._current

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def status(self) -> StepStatus:
        return self._status

    def can_advance(self) -> bool:
        """Whether some fraction applies to ``current``; only divides, never multiplies."""
        if self._status != StepStatus.ADVANCED:
            return False
        return any(
            self._current.try_divide(f.denominator) is not None for f in self._program.fractions
        )

    def step(self) -> StepOutcome[N]:
        if self._status == StepStatus.HALTED:
            return StepOutcome(status=StepStatus.HALTED)
        if self._status == StepStatus.FAILED:
            return StepOutcome(status=StepStatus.FAILED, error=self._error)

        for index, fraction in enumerate(self._program.fractions):
            try:
                candidate = fraction.apply(self._current)
            except ArithmeticOverflow as e:
                self._status = StepStatus.FAILED
                self._error = e
                _logger.warning(
                    "execution failed at step %d on fraction %d (%s): %s",
                    self._steps + 1,
                    index,
                    fraction,
                    e,
                )
                return StepOutcome(status=StepStatus.FAILED, fraction_index=index, error=e)
            if candidate is not None:
                self._current = candidate
                self._steps += 1
                return StepOutcome(
                    status=StepStatus.ADVANCED, value=candidate, fraction_index=index
                )

        self._status = StepStatus.HALTED
        _logger.debug("program halted after %d steps", self._steps)
        return StepOutcome(status=StepStatus.HALTED)

    def __iter__(self) -> Evaluator[N]:
        return self

    def __next__(self) -> N:
        outcome = self.step()
        if outcome.status == StepStatus.ADVANCED:
            return outcome.value
        if outcome.status == StepStatus.FAILED:
            raise outcome.error
        raise StopIteration


def run(program: Program[N], initial: N, *, max_steps: int | None = None) -> RunResult[N]:
    """Drive ``program`` from ``initial`` until it halts or ``max_steps`` pass.

    ``ArithmeticOverflow`` propagates; a run stopped by the step cap while some
    fraction could still fire comes back with ``halted=False``.
    """
    if max_steps is not None and max_steps < 0:
        raise ValueError("max_steps must be non-negative")

    evaluator = program.lazy_exec(initial)
    while max_steps is None or evaluator.steps < max_steps:
        outcome = evaluator.step()
        if outcome.status == StepStatus.FAILED:
            raise outcome.error
        if outcome.status == StepStatus.HALTED:
            return RunResult(final=evaluator.current, steps=evaluator.steps, halted=True)
        _logger.debug(
            "step %d: fraction %d -> %s", evaluator.steps, outcome.fraction_index, outcome.value
        )
    # At the cap: still report a halt when no fraction can fire on the last state.
    if not evaluator.can_advance():
        evaluator.step()
        return RunResult(final=evaluator.current, steps=evaluator.steps, halted=True)
    return RunResult(final=evaluator.current, steps=evaluator.steps, halted=False)
