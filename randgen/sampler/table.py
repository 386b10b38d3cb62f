"""Distribution table construction and validation."""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from randgen.errors import (
    InvalidOutcomeError,
    OutOfRangeError,
    ProbabilitySumError,
    ShapeMismatchError,
)

logger = logging.getLogger(__name__)

# Tolerance shared by the range, sum, and trivial-case checks.
ACCEPTABLE_ERROR = 1e-8


@dataclass(frozen=True)
class DistributionTable:
    """Validated outcomes with their probabilities and cumulative probabilities.

    ``cumulative[i]`` is the upper bound of the segment of ``[0, 1]`` owned by
    outcome ``i``; index 0 owns ``(0, cumulative[0]]`` and every later index
    owns ``(cumulative[i - 1], cumulative[i]]``.
    """

    outcomes: Tuple[int, ...]
    probabilities: Tuple[float, ...]
    cumulative: np.ndarray
    trivial_index: Optional[int] = None

    @property
    def size(self) -> int:
        """Number ``k`` of outcomes."""

        return len(self.outcomes)

    @property
    def is_trivial(self) -> bool:
        """``True`` when a single outcome carries all of the probability."""

        return self.trivial_index is not None


def build_table(
    outcomes: Optional[Sequence[int]],
    probabilities: Optional[Sequence[float]],
) -> DistributionTable:
    """
    Validate ``outcomes``/``probabilities`` and build the cumulative table.

    Raises ``ShapeMismatchError`` for missing, empty, or unequal inputs,
    ``InvalidOutcomeError`` for an outcome that is not a 64-bit integer,
    ``OutOfRangeError`` for the first probability outside ``[0, 1]`` (NaN and
    infinities included) and ``ProbabilitySumError`` when the total differs
    from 1.0 by more than ``ACCEPTABLE_ERROR * k``.
    """

    size = _input_size(outcomes, probabilities)
    values = tuple(_check_outcome(idx, value) for idx, value in enumerate(outcomes))
    probs = np.asarray(list(probabilities), dtype=float)
    if probs.ndim != 1:
        raise ShapeMismatchError("Expecting probabilities to be a flat sequence")

    trivial_candidate: Optional[int] = None
    for idx, prob in enumerate(probs):
        if _is_certain(idx, float(prob)):
            trivial_candidate = idx

    cumulative = np.cumsum(probs)
    total = float(cumulative[-1])
    if abs(total - 1.0) > ACCEPTABLE_ERROR * size:
        raise ProbabilitySumError(total)
    cumulative.setflags(write=False)

    if trivial_candidate is not None:
        logger.info(
            "For an array of %d random numbers, all have probability zero except one "
            "which has probability 1 - random value %d will always be returned",
            size,
            values[trivial_candidate],
        )
    return DistributionTable(
        outcomes=values,
        probabilities=tuple(float(p) for p in probs),
        cumulative=cumulative,
        trivial_index=trivial_candidate,
    )


def _input_size(
    outcomes: Optional[Sequence[int]],
    probabilities: Optional[Sequence[float]],
) -> int:
    """Return the shared, non-zero length of both inputs."""

    if (
        outcomes is None
        or probabilities is None
        or len(outcomes) != len(probabilities)
        or len(outcomes) == 0
    ):
        raise ShapeMismatchError(
            "Expecting outcomes and probabilities to be non-null and of the same non-zero length"
        )
    return len(outcomes)


def _is_certain(idx: int, prob: float) -> bool:
    """Range-check ``prob`` and report whether it equals 1.0 within tolerance."""

    if not np.isfinite(prob) or prob < 0.0 or prob > 1.0:
        raise OutOfRangeError(idx, prob)
    return abs(prob - 1.0) < ACCEPTABLE_ERROR


_INT64 = np.iinfo(np.int64)


def _check_outcome(idx: int, value: object) -> int:
    """Return ``value`` as an ``int``, rejecting non-integers and values outside int64."""

    try:
        number = operator.index(value)
    except TypeError:
        raise InvalidOutcomeError(idx, value) from None
    if not _INT64.min <= number <= _INT64.max:
        raise InvalidOutcomeError(idx, value)
    return number
