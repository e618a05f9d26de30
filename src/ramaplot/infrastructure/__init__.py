"""Infrastructure implementations of core interfaces and adapters."""

from .repositories.structure_repository import StructureRepository
from .adapters.matplotlib_renderer import MatplotlibRenderer
from .adapters.mdtraj_adapter import MDTrajAdapter

__all__ = [
    "StructureRepository",
    "MatplotlibRenderer",
    "MDTrajAdapter",
]
