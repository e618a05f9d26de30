"""Core domain models, interfaces and services for Ramachandran analysis."""

from .domain.models.atom import Atom, AtomSequence
from .domain.models.dihedral_site import DihedralSite
from .domain.models.plot_point import DihedralAngle, Shape, TaggedPoint
from .domain.models.plot_settings import PlotSettings
from .domain.models.residue_selector import ResidueSelector
from .domain.interfaces.renderer import Renderer
from .services.backbone_scanner import BackboneScanner
from .services.color_mapper import ColorMapper
from .services.dihedral_evaluator import DihedralEvaluator
from .services.plot_assembler import PlotAssembler
from .services.residue_filter import ResidueFilter
from .services.shape_tagger import ShapeTagger

__all__ = [
    "Atom",
    "AtomSequence",
    "DihedralSite",
    "DihedralAngle",
    "Shape",
    "TaggedPoint",
    "PlotSettings",
    "ResidueSelector",
    "Renderer",
    "BackboneScanner",
    "ColorMapper",
    "DihedralEvaluator",
    "PlotAssembler",
    "ResidueFilter",
    "ShapeTagger",
]
