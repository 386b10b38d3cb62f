"""Typer-based CLI entry points for drawing and summarising random numbers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

# ---- project imports ----
from randgen.config import RunConfig, load_config
from randgen.emit.plot_emit import write_frequency_plot
from randgen.emit.yaml_emit import write_summary
from randgen.errors import ValidationError
from randgen.profiler.summary import Summarizer
from randgen.sampler.generator import Sampler

EXAMPLE_NUMS = [-1, 0, 1, 2, 3]
EXAMPLE_PROBS = [0.01, 0.3, 0.58, 0.1, 0.01]

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Typer app
# -----------------------------------------------------------------------------
app = typer.Typer(help="Weighted random generator CLI.")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", help="Logging level (e.g. INFO, DEBUG)."),
):
    """Configure logging for every command."""
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# -----------------------------------------------------------------------------
# Utility helpers (shared by commands)
# -----------------------------------------------------------------------------
def _build_sampler(cfg: RunConfig) -> Sampler:
    """Construct the sampler, reporting invalid distributions as CLI errors."""
    try:
        return cfg.build_sampler()
    except ValidationError as exc:
        typer.echo(f"[run] invalid distribution: {exc}", err=True)
        raise typer.Exit(code=1)


def _ensure_parent_dir(path: Path) -> None:
    """Create the parent directory for `path` if needed."""
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


# -----------------------------------------------------------------------------
# DEMO: draw from the built-in example distribution
# -----------------------------------------------------------------------------
@app.command(name="demo")
def demo(
    iterations: int = typer.Option(100, min=0, help="Number of draws."),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible draw sequence."),
    breakdown: bool = typer.Option(True, help="Show one report row per random number."),
):
    """Draw from {-1, 0, 1, 2, 3} with probabilities {0.01, 0.3, 0.58, 0.1, 0.01}."""
    gen = Sampler(EXAMPLE_NUMS, EXAMPLE_PROBS, seed=seed)
    typer.echo(
        f"Example data: {EXAMPLE_NUMS} with probabilities {EXAMPLE_PROBS}"
    )
    draws = [str(gen.draw()) for _ in range(iterations)]
    typer.echo(f"Call {iterations} times.....{','.join(draws)}")
    typer.echo(Summarizer(gen).report(breakdown))


# -----------------------------------------------------------------------------
# RUN: draw from a distribution described by a YAML file
# -----------------------------------------------------------------------------
@app.command(name="run")
def run(
    config: Path = typer.Option(..., exists=True, dir_okay=False, help="YAML with outcomes, probabilities and generation settings."),
    out: Optional[Path] = typer.Option(None, help="Optional summary YAML output."),
    plot: Optional[Path] = typer.Option(None, help="Optional PNG chart of expected vs observed frequencies."),
    significance: float = typer.Option(0.01, help="Significance level for the chi-squared test."),
):
    """Draw the configured number of times and report goodness of fit."""
    if not 0.0 < significance < 1.0:
        raise typer.BadParameter("significance must be within (0, 1)", param_hint="--significance")
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config")

    gen = _build_sampler(cfg)
    logger.debug("Drawing %d values from %r", cfg.draws, gen)
    gen.draw_many(cfg.draws)

    summary = Summarizer(gen)
    typer.echo(summary.report(cfg.show_breakdown))
    if summary.degrees_of_freedom > 0:
        verdict = "consistent" if summary.is_consistent(significance) else "NOT consistent"
        typer.echo(
            f"[run] chi2 p-value={summary.p_value():.4f} "
            f"({verdict} with the distribution at P={significance})"
        )

    if out:
        _ensure_parent_dir(out)
        write_summary(
            out,
            summary,
            metadata={"config": str(config), "seed": cfg.seed},
            significance=significance,
        )
        typer.echo(f"[run] Wrote summary YAML to {out}")
    if plot:
        _ensure_parent_dir(plot)
        write_frequency_plot(plot, summary)
        typer.echo(f"[run] Wrote chart to {plot}")


if __name__ == "__main__":
    app()
