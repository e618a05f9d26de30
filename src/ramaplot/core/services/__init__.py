"""Core business logic services."""

from .backbone_scanner import BackboneScanner
from .color_mapper import ColorMapper
from .dihedral_evaluator import DihedralEvaluator, dihedral
from .plot_assembler import PlotAssembler
from .residue_filter import ResidueFilter
from .shape_tagger import ShapeTagger, shape_for

__all__ = [
    "BackboneScanner",
    "ColorMapper",
    "DihedralEvaluator",
    "dihedral",
    "PlotAssembler",
    "ResidueFilter",
    "ShapeTagger",
    "shape_for",
]
