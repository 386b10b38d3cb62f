"""Exceptions raised while building or analysing a generator."""

from __future__ import annotations


class ValidationError(ValueError):
    """Outcome/probability inputs cannot form a distribution table."""


class ShapeMismatchError(ValidationError):
    """Inputs are missing, empty, or of unequal length."""


class OutOfRangeError(ValidationError):
    """A probability lies outside ``[0, 1]`` or is not finite."""

    def __init__(self, index: int, value: float) -> None:
        super().__init__(
            "Expecting probabilities to have values between 0 and 1, "
            f"probability at index {index} has illegal value: {value:4.3f}"
        )
        self.index = index
        self.value = value


class ProbabilitySumError(ValidationError):
    """Probabilities do not total to 1.0 within tolerance."""

    def __init__(self, total: float) -> None:
        super().__init__(
            "Expecting probabilities to total to 1.0, "
            f"however total differs by {total - 1.0:9.8f}"
        )
        self.total = total


class ImpossibleObservationError(ArithmeticError):
    """A zero-probability outcome was observed, so chi-squared is undefined."""

    def __init__(self, value: int, occurrences: int) -> None:
        super().__init__(
            f"Random number {value} has probability zero, but generator has "
            f"generated {occurrences} occurrences - unable to calculate "
            "chi squared statistic"
        )
        self.value = value
        self.occurrences = occurrences


class InvalidOutcomeError(ValidationError):
    """An outcome is not an integer or does not fit in a signed 64-bit value."""

    def __init__(self, index: int, value: object) -> None:
        super().__init__(
            "Expecting outcomes to be 64-bit integers, "
            f"outcome at index {index} has illegal value: {value!r}"
        )
        self.index = index
        self.value = value
