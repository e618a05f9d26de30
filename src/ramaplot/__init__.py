"""Backbone dihedral extraction and Ramachandran plotting."""

from .core import (
    Atom,
    AtomSequence,
    BackboneScanner,
    ColorMapper,
    DihedralAngle,
    DihedralEvaluator,
    DihedralSite,
    PlotAssembler,
    PlotSettings,
    Renderer,
    ResidueFilter,
    ResidueSelector,
    Shape,
    ShapeTagger,
    TaggedPoint,
)

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "AtomSequence",
    "BackboneScanner",
    "ColorMapper",
    "DihedralAngle",
    "DihedralEvaluator",
    "DihedralSite",
    "PlotAssembler",
    "PlotSettings",
    "Renderer",
    "ResidueFilter",
    "ResidueSelector",
    "Shape",
    "ShapeTagger",
    "TaggedPoint",
]
