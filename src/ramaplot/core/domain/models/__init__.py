"""Domain model classes."""

from .atom import NO_CHAIN, Atom, AtomSequence
from .dihedral_site import DihedralSite
from .plot_point import RGB, DihedralAngle, Shape, TaggedPoint
from .plot_settings import PlotSettings
from .residue_selector import OPEN_END, ResidueSelector
from .structure import Structure

__all__ = [
    "NO_CHAIN",
    "Atom",
    "AtomSequence",
    "DihedralSite",
    "RGB",
    "DihedralAngle",
    "Shape",
    "TaggedPoint",
    "PlotSettings",
    "OPEN_END",
    "ResidueSelector",
    "Structure",
]
