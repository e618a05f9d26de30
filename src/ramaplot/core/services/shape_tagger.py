"""Glyph assignment for highlighted (tagged) points."""

from typing import Tuple

from ..domain.errors import TooManyTagsError
from ..domain.models.plot_point import Shape

TAG_SHAPES: Tuple[Shape, ...] = (
    Shape.PYRAMID,
    Shape.CIRCLE,
    Shape.SQUARE,
    Shape.CROSS,
)
MAX_TAGS = len(TAG_SHAPES)
DEFAULT_SHAPE = Shape.RING


def shape_for(tag_rank: int) -> Shape:
    """
    Shape of the ``tag_rank``-th tagged point of a series.

    Raises:
        TooManyTagsError: For ranks beyond the fourth. The point can still
            be drawn with ``DEFAULT_SHAPE``.
    """
    if 0 <= tag_rank < MAX_TAGS:
        return TAG_SHAPES[tag_rank]
    raise TooManyTagsError(tag_rank, "shape_for")


class ShapeTagger:
    """Hands out tag shapes in order for a single series."""

    def __init__(self):
        self._tagged = 0

    @property
    def tagged(self) -> int:
        """Number of tags requested so far, including refused ones."""
        return self._tagged

    def tag(self) -> Tuple[int, Shape]:
        """
        Tag the next point.

        Returns:
            Tuple of (tag rank, shape)

        Raises:
            TooManyTagsError: Once four points have been tagged
        """
        rank = self._tagged
        self._tagged += 1
        return rank, shape_for(rank)
