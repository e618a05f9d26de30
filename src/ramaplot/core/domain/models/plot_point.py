"""Domain models for evaluated angles and the points handed to a renderer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

RGB = Tuple[int, int, int]


class Shape(Enum):
    """Glyph used to draw a point. RING is the default, untagged glyph."""

    RING = "ring"
    PYRAMID = "pyramid"
    CIRCLE = "circle"
    SQUARE = "square"
    CROSS = "cross"


@dataclass(frozen=True)
class DihedralAngle:
    """Phi/psi pair in degrees, each in [-180, 180]."""

    phi: float
    psi: float


@dataclass(frozen=True)
class TaggedPoint:
    """A fully resolved plot point."""

    angle: DihedralAngle
    color: RGB
    shape: Shape = Shape.RING
    tag_rank: Optional[int] = None

    @property
    def x(self) -> float:
        return self.angle.phi

    @property
    def y(self) -> float:
        return self.angle.psi

    @property
    def tagged(self) -> bool:
        return self.tag_rank is not None
