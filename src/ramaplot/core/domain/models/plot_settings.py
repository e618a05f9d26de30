"""Configuration for a rendered Ramachandran plot."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Tuple, Union

AXIS_BOUNDS: Tuple[float, float] = (-180.0, 180.0)


@dataclass
class PlotSettings:
    """Plot metadata handed to a renderer together with the points."""

    title: str = "Ramachandran plot"
    output: str = "ramachandran"
    width: float = 4.0
    height: float = 4.0
    dpi: int = 100
    grid: bool = True
    x_label: str = "Phi"
    y_label: str = "Psi"

    @classmethod
    def single(cls, title: str, output: str) -> "PlotSettings":
        """Settings for a plot with one color-ramped series (4x4 in)."""
        return cls(title=title, output=output, width=4.0, height=4.0)

    @classmethod
    def multi(cls, title: str, output: str) -> "PlotSettings":
        """Settings for a plot made of several sub-series (5x5 in)."""
        return cls(title=title, output=output, width=5.0, height=5.0)

    @classmethod
    def from_json(cls, path: Union[str, Path], **overrides) -> "PlotSettings":
        """
        Load settings from a JSON object, ignoring unknown keys.

        Args:
            path: JSON file with any subset of the settings fields
            **overrides: Values taking precedence over the file

        Returns:
            PlotSettings instance
        """
        with open(path, "r") as f:
            data = json.load(f)
        known = {field.name for field in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def bounds(self) -> Tuple[float, float]:
        """Both axes span the full dihedral range."""
        return AXIS_BOUNDS

    @property
    def filename(self) -> Path:
        return Path(f"{self.output}.png")

    def to_dict(self) -> dict:
        return asdict(self)
