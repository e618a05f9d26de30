"""Interface for plot rendering backends."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from ..models.plot_point import TaggedPoint
from ..models.plot_settings import PlotSettings


class Renderer(ABC):
    """Abstract base class for backends that draw Ramachandran plots."""

    @abstractmethod
    def render(self, series: List[List[TaggedPoint]], settings: PlotSettings) -> Path:
        """
        Draw fully resolved points.

        Args:
            series: Points per series, each already colored and shaped
            settings: Title, output name and figure settings

        Returns:
            Path of the written image
        """
        pass
