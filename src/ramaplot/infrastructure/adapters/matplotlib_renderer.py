"""Matplotlib backend for Ramachandran plots."""

import logging
import os
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ...core.domain.interfaces.renderer import Renderer
from ...core.domain.models.plot_point import RGB, Shape, TaggedPoint
from ...core.domain.models.plot_settings import PlotSettings

logger = logging.getLogger(__name__)


class MatplotlibRenderer(Renderer):
    """Writes Ramachandran plots as PNG images."""

    MARKERS: Dict[Shape, str] = {
        Shape.RING: "o",
        Shape.PYRAMID: "^",
        Shape.CIRCLE: "o",
        Shape.SQUARE: "s",
        Shape.CROSS: "x",
    }

    def __init__(self, marker_size: float = 20.0, tagged_marker_size: float = 45.0):
        self.marker_size = marker_size
        self.tagged_marker_size = tagged_marker_size

    def render(self, series: List[List[TaggedPoint]], settings: PlotSettings) -> Path:
        """Draw the points and save ``<settings.output>.png``."""
        filename = settings.filename
        if filename.parent != Path("."):
            os.makedirs(filename.parent, exist_ok=True)

        fig, ax = plt.subplots(figsize=(settings.width, settings.height))
        try:
            ax.set_title(settings.title, pad=8)
            ax.set_xlabel(settings.x_label)
            ax.set_ylabel(settings.y_label)
            ax.set_xlim(*settings.bounds)
            ax.set_ylim(*settings.bounds)
            ax.set_xticks(range(-180, 181, 90))
            ax.set_yticks(range(-180, 181, 90))
            if settings.grid:
                ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.7)

            for points in series:
                for shape, (xs, ys, colors) in self._group_by_shape(points).items():
                    self._scatter(ax, shape, xs, ys, colors)

            fig.savefig(filename, dpi=settings.dpi, bbox_inches="tight")
        finally:
            plt.close(fig)
        logger.info("Saved plot to %s", filename)
        return filename

    @staticmethod
    def _group_by_shape(
        points: List[TaggedPoint],
    ) -> Dict[Shape, Tuple[List[float], List[float], List[Tuple[float, float, float]]]]:
        groups = defaultdict(lambda: ([], [], []))
        for point in points:
            xs, ys, colors = groups[point.shape]
            xs.append(point.x)
            ys.append(point.y)
            colors.append(_to_unit(point.color))
        return groups

    def _scatter(self, ax, shape: Shape, xs, ys, colors) -> None:
        marker = self.MARKERS[shape]
        if shape is Shape.RING:
            ax.scatter(
                xs, ys, s=self.marker_size, marker=marker,
                facecolors="none", edgecolors=colors, linewidths=1.0,
            )
        else:
            ax.scatter(
                xs, ys, s=self.tagged_marker_size, marker=marker,
                c=colors, linewidths=1.5, zorder=3,
            )


def _to_unit(color: RGB) -> Tuple[float, float, float]:
    r, g, b = color
    return r / 255.0, g / 255.0, b / 255.0
