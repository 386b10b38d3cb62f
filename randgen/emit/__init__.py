"""Emit run summaries to external representations."""

from .plot_emit import write_frequency_plot
from .yaml_emit import write_summary

__all__ = ["write_summary", "write_frequency_plot"]
