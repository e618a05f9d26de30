"""Domain model pairing a topology with its coordinate frames."""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .atom import AtomSequence


@dataclass
class Structure:
    """Atoms of a structure and one (n_atoms, 3) coordinate array per frame."""

    atoms: AtomSequence
    frames: List[np.ndarray] = field(default_factory=list)
    source_file: str = ""

    @property
    def n_frames(self) -> int:
        return len(self.frames)

    def frame(self, index: int) -> np.ndarray:
        """Coordinates of one frame, in Angstrom."""
        return self.frames[index]
