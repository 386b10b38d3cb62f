"""Summaries of a generator's drawn occurrences.

Two measures show whether the generator is unbiased:

- the standard error of mean (SEM) of the deviations ``|p_i - O_i/n|``, an
  estimate of how far their sample mean is likely to be from the population
  mean; it should shrink as the number of draws grows.
- the chi-squared statistic, which tests whether observed occurrences differ
  significantly from the expected ones. The test needs an expected count of
  at least 5 in every category to be meaningful.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from randgen.sampler.generator import Sampler

from . import stats
from .fit import chi_squared_p_value, critical_value
from .stats import OutcomeStats

_LINE = "=" * 73


class Summarizer:
    """
    Goodness-of-fit statistics for a generator at one point in time.

    The outcomes, probabilities, and occurrence counts are copied on
    construction; later draws on the source generator are not reflected.
    """

    def __init__(self, sampler: Sampler) -> None:
        rows = [
            OutcomeStats(value=value, probability=prob, occurrences=occ)
            for value, prob, occ in zip(
                sampler.outcomes, sampler.probabilities, sampler.occurrence_counts
            )
        ]
        self._rows: Tuple[OutcomeStats, ...] = tuple(rows)
        self._count = sampler.draw_count

    @classmethod
    def from_snapshot(cls, rows: Iterable[OutcomeStats], count: int) -> "Summarizer":
        """Build a summary from already captured rows and total draw count."""

        rows = tuple(rows)
        if not rows:
            raise ValueError("Expecting at least one outcome to summarise")
        summary = cls.__new__(cls)
        summary._rows = rows
        summary._count = int(count)
        return summary

    @property
    def rows(self) -> Tuple[OutcomeStats, ...]:
        return self._rows

    @property
    def count(self) -> int:
        """Number of draws ``n`` at snapshot time."""

        return self._count

    @property
    def degrees_of_freedom(self) -> int:
        return len(self._rows) - 1

    # ------------------------------------------------------------------ statistics
    def _row(self, index: int) -> OutcomeStats:
        if not 0 <= index < len(self._rows):
            raise IndexError(
                f"Outcome index {index} out of range for k={len(self._rows)} outcomes"
            )
        return self._rows[index]

    def deviation(self, index: int) -> float:
        return self._row(index).deviation(self._count)

    def chi_squared(self, index: int) -> float:
        """Chi-squared contribution of one outcome; see ``OutcomeStats.chi_squared``."""

        return self._row(index).chi_squared(self._count)

    def deviations(self) -> List[float]:
        return [row.deviation(self._count) for row in self._rows]

    def total_chi_squared(self) -> float:
        return sum(row.chi_squared(self._count) for row in self._rows)

    def total_deviation(self) -> float:
        return sum(self.deviations())

    @staticmethod
    def mean(values: Iterable[float]) -> float:
        return stats.mean(values)

    @staticmethod
    def standard_deviation(values: Iterable[float]) -> float:
        return stats.standard_deviation(values)

    def standard_error_of_mean(self) -> float:
        """
        SEM of the deviations ``x_i = |p_i - O_i/n|`` over the ``k`` outcomes.

        SEM = sqrt(1/(k-1) * sum_i (x_i - x0)^2) / sqrt(k), with x0 the mean of x_i.
        """

        return self.standard_deviation(self.deviations()) / math.sqrt(len(self._rows))

    def p_value(self) -> float:
        return chi_squared_p_value(self.total_chi_squared(), self.degrees_of_freedom)

    def is_consistent(self, significance: float = 0.01) -> bool:
        """``True`` unless the chi-squared statistic rejects the configured distribution."""

        if self.degrees_of_freedom < 1:
            return True
        return self.total_chi_squared() <= critical_value(self.degrees_of_freedom, significance)

    # ------------------------------------------------------------------ output
    def report(self, show_breakdown: bool = True) -> str:
        """
        Format the results as text.

        With ``show_breakdown`` every outcome gets a row; the totals line is
        always included.
        """

        parts = [_LINE]
        if show_breakdown:
            parts.append(
                f"\n {'Random':<6} | {'Probability':<11} | {'Actual Occurrences':<18} "
                f"| {'Chi squared':<18} | {'Deviation':<10}"
            )
            parts.append(
                f"\n {'Number':<6} | {' pi ':<11} | {' Oi ':<18} "
                f"| {'(pi*n-Oi)^2/(pi*n)':<18} | {' |pi - Oi/n| ':<10}\n"
            )
            parts.append(_LINE)

        total_chi2 = 0.0
        total_dev = 0.0
        for row in self._rows:
            chi2 = row.chi_squared(self._count)
            deviation = row.deviation(self._count)
            total_chi2 += chi2
            total_dev += deviation
            if show_breakdown:
                parts.append(
                    f"\n {row.value:<6d} | {row.probability:<11.4f} "
                    f"| {row.occurrences:9d} times    | {chi2:<17.4f}  | {deviation:<12.4f} "
                )

        parts.append(
            f"\nFor an array of k={len(self._rows)} integers, after n={self._count} attempts: "
            f"chi squared statistic= {total_chi2:5.4f}, total deviation={total_dev:5.4f}, "
            f"std error of mean= {self.standard_error_of_mean():5.4f} \n"
        )
        return "".join(parts)

    def to_frame(self) -> pd.DataFrame:
        """Per-outcome breakdown as a ``DataFrame``."""

        records = [
            {
                "number": row.value,
                "probability": row.probability,
                "occurrences": row.occurrences,
                "chi_squared": row.chi_squared(self._count),
                "deviation": row.deviation(self._count),
            }
            for row in self._rows
        ]
        return pd.DataFrame.from_records(
            records,
            columns=["number", "probability", "occurrences", "chi_squared", "deviation"],
        )

    def to_dict(self, significance: Optional[float] = None) -> Dict[str, object]:
        """Serialize the summary into built-in Python types."""

        outcomes = []
        for row in self._rows:
            entry = row.to_dict()
            entry["chi_squared"] = float(row.chi_squared(self._count))
            entry["deviation"] = float(row.deviation(self._count))
            outcomes.append(entry)
        payload: Dict[str, object] = {
            "k": len(self._rows),
            "n": int(self._count),
            "degrees_of_freedom": self.degrees_of_freedom,
            "total_chi_squared": float(self.total_chi_squared()),
            "total_deviation": float(self.total_deviation()),
            "standard_error_of_mean": float(self.standard_error_of_mean()),
            "p_value": float(self.p_value()),
            "outcomes": outcomes,
        }
        if significance is not None:
            payload["significance"] = float(significance)
            payload["consistent"] = bool(self.is_consistent(significance))
        return payload
