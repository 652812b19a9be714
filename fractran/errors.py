from __future__ import annotations


class FractranError(Exception):
    pass


class UnrepresentableValue(FractranError, ValueError):
    """An integer that the chosen numeric representation cannot hold."""

    def __init__(self, value: int, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"cannot represent {value}: {reason}")


class ArithmeticOverflow(FractranError, OverflowError):
    """A product or exponent past the representation's fixed bound.

    Fatal to the run that hit it: the state would no longer be exact.
    """

    def __init__(self, message: str, *, bound: int | None = None) -> None:
        self.bound = bound
        super().__init__(message)


class InvalidFraction(FractranError, ValueError):
    pass


class InvalidProgram(FractranError, ValueError):
    pass


class StepLimitExceeded(FractranError):
    def __init__(self, max_steps: int) -> None:
        self.max_steps = max_steps
        super().__init__(f"program did not halt within {max_steps} steps")
