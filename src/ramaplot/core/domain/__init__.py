"""Core domain models, errors and interfaces."""

from .models import (
    Atom,
    AtomSequence,
    DihedralAngle,
    DihedralSite,
    PlotSettings,
    ResidueSelector,
    Shape,
    TaggedPoint,
)
from .errors import (
    BackboneInconsistencyError,
    ErrorKind,
    IndexOutOfRangeError,
    LengthMismatchError,
    NilInputError,
    RamachandranError,
    TooManyTagsError,
)
from .interfaces.renderer import Renderer

__all__ = [
    "Atom",
    "AtomSequence",
    "DihedralAngle",
    "DihedralSite",
    "PlotSettings",
    "ResidueSelector",
    "Shape",
    "TaggedPoint",
    "BackboneInconsistencyError",
    "ErrorKind",
    "IndexOutOfRangeError",
    "LengthMismatchError",
    "NilInputError",
    "RamachandranError",
    "TooManyTagsError",
    "Renderer",
]
