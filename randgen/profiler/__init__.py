"""Goodness-of-fit summaries for generator output."""

from .fit import chi_squared_p_value, critical_value
from .stats import OutcomeStats, mean, standard_deviation
from .summary import Summarizer

__all__ = [
    "OutcomeStats",
    "Summarizer",
    "chi_squared_p_value",
    "critical_value",
    "mean",
    "standard_deviation",
]
