"""Adapters for external libraries."""

from .matplotlib_renderer import MatplotlibRenderer
from .mdtraj_adapter import MDTrajAdapter

__all__ = [
    "MatplotlibRenderer",
    "MDTrajAdapter",
]
