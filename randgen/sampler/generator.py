"""Weighted random generator backed by a cumulative probability search.

To draw one of the ``k`` outcomes, ``[0, 1]`` is divided into ``k`` segments
whose lengths equal the outcome probabilities. The segment boundaries are the
cumulative probabilities, already sorted in ascending order, so a uniform
value is mapped to its segment with a binary search.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from .table import DistributionTable, build_table


class TrivialStrategy:
    """Always select the single outcome whose probability is 1."""

    def __init__(self, index: int) -> None:
        self.index = index

    def select(self, rng) -> int:
        return self.index

    def select_many(self, rng, n: int) -> np.ndarray:
        return np.full(n, self.index, dtype=np.intp)


class WeightedSearchStrategy:
    """Select the leftmost index whose cumulative probability covers a uniform draw."""

    def __init__(self, cumulative: np.ndarray) -> None:
        self.cumulative = cumulative
        # Rounding can leave cumulative[-1] just below 1.0.
        self._last = len(cumulative) - 1

    def select(self, rng) -> int:
        idx = int(np.searchsorted(self.cumulative, rng.random(), side="left"))
        return min(idx, self._last)

    def select_many(self, rng, n: int) -> np.ndarray:
        if isinstance(rng, np.random.Generator):
            uniforms = rng.random(n)
        else:
            uniforms = np.fromiter((rng.random() for _ in range(n)), dtype=float, count=n)
        indices = np.searchsorted(self.cumulative, uniforms, side="left")
        return np.minimum(indices, self._last)


def _select_strategy(table: DistributionTable):
    if table.is_trivial:
        return TrivialStrategy(table.trivial_index)
    return WeightedSearchStrategy(table.cumulative)


class Sampler:
    """
    Return outcomes with their configured probabilities over many draws.

    The uniform source is any object whose ``random()`` method returns a float
    in ``[0, 1)``; by default a ``numpy.random.Generator`` seeded with
    ``seed``. Identical tables, seeds, and call sequences reproduce identical
    draws. Instances are not thread-safe: ``draw`` mutates the occurrence
    counters and the random source without locking.
    """

    def __init__(
        self,
        outcomes: Sequence[int],
        probabilities: Sequence[float],
        seed: Optional[int] = None,
        rng=None,
    ) -> None:
        if seed is not None and rng is not None:
            raise ValueError("Provide either a seed or a random source, not both")
        self._table = build_table(outcomes, probabilities)
        self._strategy = _select_strategy(self._table)
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._values = np.asarray(self._table.outcomes, dtype=np.int64)
        self._occurrences = np.zeros(self._table.size, dtype=np.int64)
        self._count = 0

    @classmethod
    def with_seed(
        cls,
        outcomes: Sequence[int],
        probabilities: Sequence[float],
        seed: int,
    ) -> "Sampler":
        """Build a sampler whose draw sequence is reproducible from ``seed``."""

        return cls(outcomes, probabilities, seed=seed)

    def draw(self) -> int:
        """Return one outcome and record its occurrence."""

        index = self._strategy.select(self._rng)
        self._occurrences[index] += 1
        self._count += 1
        return self._table.outcomes[index]

    def draw_many(self, n: int) -> np.ndarray:
        """Return ``n`` outcomes at once, recording them like ``n`` calls to ``draw``."""

        if n < 0:
            raise ValueError(f"Number of draws must be >= 0, got {n}")
        if n == 0:
            return np.empty(0, dtype=np.int64)
        indices = self._strategy.select_many(self._rng, n)
        self._occurrences += np.bincount(indices, minlength=self._table.size)
        self._count += n
        return self._values[indices]

    # ------------------------------------------------------------------ accessors
    @property
    def outcomes(self) -> Tuple[int, ...]:
        return self._table.outcomes

    @property
    def probabilities(self) -> Tuple[float, ...]:
        return self._table.probabilities

    @property
    def occurrence_counts(self) -> Tuple[int, ...]:
        """Snapshot of how many times each outcome has been drawn."""

        return tuple(int(c) for c in self._occurrences)

    @property
    def draw_count(self) -> int:
        return self._count

    @property
    def degrees_of_freedom(self) -> int:
        """``k - 1``: the probabilities must total 1.0, so one is not free."""

        return self._table.size - 1

    @property
    def is_trivial(self) -> bool:
        return self._table.is_trivial

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(k={self._table.size}, draws={self._count}, "
            f"trivial={self._table.is_trivial})"
        )
