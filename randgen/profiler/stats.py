"""Per-outcome snapshot rows and the basic estimators used by the summarizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, MutableMapping

import numpy as np

from randgen.errors import ImpossibleObservationError
from randgen.sampler.table import ACCEPTABLE_ERROR


@dataclass(frozen=True)
class OutcomeStats:
    """One outcome of a generator, frozen at snapshot time."""

    value: int
    probability: float
    occurrences: int

    def deviation(self, count: int) -> float:
        """``|O_i / n - p_i|``, or ``p_i`` when nothing has been drawn."""

        if count > 0:
            return abs(self.occurrences / count - self.probability)
        return self.probability

    def chi_squared(self, count: int) -> float:
        """``(O_i - E_i)^2 / E_i`` with expected occurrences ``E_i = p_i * n``."""

        expected = self.probability * count
        if expected > 0:
            diff = self.occurrences - expected
            return diff * diff / expected
        if self.probability < ACCEPTABLE_ERROR and self.occurrences > 0 and count > 0:
            raise ImpossibleObservationError(self.value, self.occurrences)
        return 0.0

    def to_dict(self) -> Dict[str, object]:
        """Serialize into built-in Python types."""

        return {
            "value": int(self.value),
            "probability": float(self.probability),
            "occurrences": int(self.occurrences),
        }

    @classmethod
    def from_dict(cls, payload: MutableMapping[str, object]) -> "OutcomeStats":
        return cls(
            value=int(payload["value"]),
            probability=float(payload["probability"]),
            occurrences=int(payload.get("occurrences", 0)),
        )


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""

    sample = np.asarray(list(values), dtype=float)
    if sample.size == 0:
        return 0.0
    return float(sample.mean())


def standard_deviation(values: Iterable[float]) -> float:
    """Sample standard deviation with divisor ``k - 1``; 0.0 when ``k <= 1``."""

    sample = np.asarray(list(values), dtype=float)
    if sample.size > 1:
        return float(np.std(sample, ddof=1))
    return 0.0
