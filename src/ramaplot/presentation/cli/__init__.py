"""Command-line interface modules."""

from .ramachandran_plot import main as ramachandran_plot_main

__all__ = ["ramachandran_plot_main"]
