# src/ramaplot/core/services/plot_assembler.py
"""Service assembling colored, tagged Ramachandran points for rendering."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Set

from ..domain.errors import NilInputError, TooManyTagsError
from ..domain.interfaces.renderer import Renderer
from ..domain.models.dihedral_site import DihedralSite
from ..domain.models.plot_point import RGB, DihedralAngle, TaggedPoint
from ..domain.models.plot_settings import PlotSettings
from .color_mapper import ColorMapper
from .dihedral_evaluator import DihedralEvaluator
from .residue_filter import ResidueFilter
from .shape_tagger import DEFAULT_SHAPE, ShapeTagger

logger = logging.getLogger(__name__)


class PlotAssembler:
    """
    Turns dihedral sites into fully resolved plot points.

    Two layouts are supported:

    - several sub-series sharing one angle space, each with its own hue
      and its own tag counter (``assemble`` and ``assemble_frames``);
    - a single series where the hue ramp runs over the points themselves
      (``assemble_single``).
    """

    def __init__(
        self,
        evaluator: Optional[DihedralEvaluator] = None,
        color_mapper: Optional[ColorMapper] = None,
        max_workers: int = 1,
    ):
        """
        Initialize the assembler.

        Args:
            evaluator: Dihedral evaluator, a default one if not given
            color_mapper: Color mapper, a default one if not given
            max_workers: Series evaluated in parallel when greater than 1
        """
        self._evaluator = evaluator or DihedralEvaluator()
        self._colors = color_mapper or ColorMapper()
        self._max_workers = max(1, max_workers)

    def assemble(
        self,
        series_list: Sequence[Sequence[DihedralSite]],
        positions,
        tag_sets: Optional[Sequence[Optional[Iterable[int]]]] = None,
    ) -> List[List[TaggedPoint]]:
        """
        Build the points of several series evaluated on one frame.

        Args:
            series_list: Dihedral sites of each series
            positions: Coordinates of the frame, shape (n_atoms, 3)
            tag_sets: Per series, the indices of points to highlight. A None
                entry means no tags for that series.

        Returns:
            Points per series, in series order

        Raises:
            NilInputError: If the series list or the coordinates are missing
            LengthMismatchError: If ``tag_sets`` has fewer entries than series
            IndexOutOfRangeError: If a site lies beyond the frame
        """
        if series_list is None:
            raise NilInputError("series list", "PlotAssembler.assemble")
        if positions is None:
            raise NilInputError("coordinates", "PlotAssembler.assemble")
        ResidueFilter.check_parallel(len(series_list), tag_sets, "tag sets")

        total = len(series_list)

        def build(key: int) -> List[TaggedPoint]:
            angles = self._evaluator.evaluate_all(series_list[key], positions)
            color = self._colors.color_for(key, total)
            return self._series_points(key, angles, lambda _: color, _tags(tag_sets, key))

        return self._map_series(build, total)

    def assemble_frames(
        self,
        sites: Sequence[DihedralSite],
        frames: Sequence,
        tags: Optional[Iterable[int]] = None,
    ) -> List[List[TaggedPoint]]:
        """
        Build one series per frame for the same sites.

        Each frame gets its own hue and tag counter; ``tags`` applies to
        every frame.
        """
        if sites is None or frames is None:
            raise NilInputError("sites or frames", "PlotAssembler.assemble_frames")
        total = len(frames)
        tag_set = set(tags or ())

        def build(key: int) -> List[TaggedPoint]:
            angles = self._evaluator.evaluate_all(sites, frames[key])
            color = self._colors.color_for(key, total)
            return self._series_points(key, angles, lambda _: color, tag_set)

        return self._map_series(build, total)

    def assemble_single(
        self,
        sites: Sequence[DihedralSite],
        positions,
        tags: Optional[Iterable[int]] = None,
    ) -> List[TaggedPoint]:
        """
        Build a single series whose points walk along the hue ramp.

        Point ``i`` of ``n`` gets the color of series ``i`` out of ``n``.
        """
        if sites is None:
            raise NilInputError("sites", "PlotAssembler.assemble_single")
        if positions is None:
            raise NilInputError("coordinates", "PlotAssembler.assemble_single")
        angles = self._evaluator.evaluate_all(sites, positions)
        total = len(angles)
        return self._series_points(
            0, angles, lambda i: self._colors.color_for(i, total), set(tags or ())
        )

    def render(
        self,
        series: List[List[TaggedPoint]],
        renderer: Renderer,
        settings: PlotSettings,
    ) -> Path:
        """Hand assembled points to a renderer and return the image path."""
        if series is None:
            raise NilInputError("points", "PlotAssembler.render")
        logger.info(
            "Rendering %d series (%d points) to %s",
            len(series),
            sum(len(points) for points in series),
            settings.filename,
        )
        return renderer.render(series, settings)

    def _map_series(
        self, build: Callable[[int], List[TaggedPoint]], total: int
    ) -> List[List[TaggedPoint]]:
        if self._max_workers > 1 and total > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                return list(executor.map(build, range(total)))
        return [build(key) for key in range(total)]

    @staticmethod
    def _series_points(
        key: int,
        angles: List[DihedralAngle],
        color_of: Callable[[int], RGB],
        tags: Set[int],
    ) -> List[TaggedPoint]:
        tagger = ShapeTagger()
        points = []
        for index, angle in enumerate(angles):
            rank, shape = None, DEFAULT_SHAPE
            if index in tags:
                try:
                    rank, shape = tagger.tag()
                except TooManyTagsError as e:
                    logger.warning("Series %d point %d left untagged: %s", key, index, e)
            points.append(
                TaggedPoint(angle=angle, color=color_of(index), shape=shape, tag_rank=rank)
            )
        return points


def _tags(tag_sets: Optional[Sequence[Optional[Iterable[int]]]], key: int) -> Set[int]:
    if tag_sets is None or tag_sets[key] is None:
        return set()
    return set(tag_sets[key])
