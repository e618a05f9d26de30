"""Command-line interfaces and other presentation layer components."""

from .cli.ramachandran_plot import main as ramachandran_plot_main

__all__ = ["ramachandran_plot_main"]
