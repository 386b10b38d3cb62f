"""Run configuration loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

import yaml

from randgen.sampler.generator import Sampler

DEFAULT_DRAWS = 100


@dataclass
class RunConfig:
    """Distribution and generation settings for a single run."""

    outcomes: List[int]
    probabilities: List[float]
    draws: int = DEFAULT_DRAWS
    seed: Optional[int] = None
    show_breakdown: bool = True

    def build_sampler(self) -> Sampler:
        return Sampler(self.outcomes, self.probabilities, seed=self.seed)

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "RunConfig":
        """
        Build a config from a mapping with ``outcomes``/``probabilities`` lists
        plus optional ``generation`` (``draws``, ``seed``) and ``report``
        (``breakdown``) sections.
        """

        missing = [key for key in ("outcomes", "probabilities") if payload.get(key) is None]
        if missing:
            raise ValueError(f"Run config is missing required keys: {', '.join(missing)}")
        outcomes = payload["outcomes"]
        probabilities = payload["probabilities"]
        if not isinstance(outcomes, list) or not isinstance(probabilities, list):
            raise ValueError("'outcomes' and 'probabilities' must be lists")

        gen = payload.get("generation") or {}
        report = payload.get("report") or {}
        if not isinstance(gen, Mapping) or not isinstance(report, Mapping):
            raise ValueError("'generation' and 'report' must be mappings")
        draws = int(gen.get("draws", DEFAULT_DRAWS))
        if draws < 0:
            raise ValueError(f"generation.draws must be >= 0, got {draws}")
        seed = gen.get("seed", None)
        return cls(
            outcomes=list(outcomes),
            probabilities=[float(p) for p in probabilities],
            draws=draws,
            seed=None if seed is None else int(seed),
            show_breakdown=bool(report.get("breakdown", True)),
        )


def load_config(path: str | Path) -> RunConfig:
    """Read a ``RunConfig`` from a YAML file."""

    with Path(path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Run config {path} must be a YAML mapping")
    return RunConfig.from_dict(payload)
