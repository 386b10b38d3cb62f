"""Chi-squared goodness-of-fit helpers."""

from __future__ import annotations

from scipy.stats import chi2


def chi_squared_p_value(statistic: float, degrees_of_freedom: int) -> float:
    """
    Probability of a chi-squared statistic at least this extreme.

    A single-outcome generator has nothing to test and always yields 1.0.
    """

    if degrees_of_freedom < 1:
        return 1.0
    return float(chi2.sf(statistic, degrees_of_freedom))


def critical_value(degrees_of_freedom: int, significance: float) -> float:
    """
    Return ``cv`` such that ``P(X2 > cv) = significance`` for the given degrees of freedom.

    E.g. for 4 degrees of freedom and significance 0.01, ``cv`` is about 13.28.
    """

    if degrees_of_freedom < 1:
        raise ValueError(f"degrees_of_freedom must be >= 1, got {degrees_of_freedom}")
    if not 0.0 < significance < 1.0:
        raise ValueError(f"significance must be within (0, 1), got {significance}")
    return float(chi2.isf(significance, degrees_of_freedom))
