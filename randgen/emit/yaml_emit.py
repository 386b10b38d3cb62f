"""YAML summary emission."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from randgen.profiler.summary import Summarizer


def write_summary(
    path: str | Path,
    summarizer: Summarizer,
    metadata: Optional[Mapping[str, object]] = None,
    significance: Optional[float] = None,
) -> None:
    """Persist a summary and optional metadata to YAML."""

    payload: Dict[str, object] = {"summary": summarizer.to_dict(significance)}
    if metadata:
        payload["metadata"] = dict(metadata)
    with Path(path).open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, sort_keys=False)
