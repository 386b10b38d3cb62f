"""
Weighted random generator (randgen) package.

This package draws integers from a finite discrete distribution by searching
a cumulative probability table, and summarises the drawn occurrences with
goodness-of-fit statistics to show that the generator is unbiased.
"""

__all__ = [
    "errors",
    "sampler",
    "profiler",
    "emit",
    "config",
    "cli",
]
