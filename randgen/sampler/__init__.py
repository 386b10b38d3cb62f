"""Distribution tables and the weighted random generator."""

from .generator import Sampler, TrivialStrategy, WeightedSearchStrategy
from .table import ACCEPTABLE_ERROR, DistributionTable, build_table

__all__ = [
    "ACCEPTABLE_ERROR",
    "DistributionTable",
    "Sampler",
    "TrivialStrategy",
    "WeightedSearchStrategy",
    "build_table",
]
