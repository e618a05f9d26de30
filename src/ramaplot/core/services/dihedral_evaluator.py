# src/ramaplot/core/services/dihedral_evaluator.py
"""Service computing phi/psi angles for resolved dihedral sites."""

from typing import Iterable, List, Sequence

import numpy as np

from ..domain.errors import IndexOutOfRangeError, NilInputError
from ..domain.models.dihedral_site import DihedralSite
from ..domain.models.plot_point import DihedralAngle


def dihedral(p0, p1, p2, p3) -> float:
    """
    Dihedral angle in radians between the planes (p0, p1, p2) and (p1, p2, p3).

    Uses the atan2 formulation, which keeps the sign and stays accurate
    near 0 and 180 degrees.
    """
    b1 = np.asarray(p1, dtype=float) - np.asarray(p0, dtype=float)
    b2 = np.asarray(p2, dtype=float) - np.asarray(p1, dtype=float)
    b3 = np.asarray(p3, dtype=float) - np.asarray(p2, dtype=float)
    n1 = np.cross(b1, b2)
    n2 = np.cross(b2, b3)
    x = np.dot(n1, n2)
    y = np.linalg.norm(b2) * np.dot(b1, n2)
    return float(np.arctan2(y, x))


class DihedralEvaluator:
    """Stateless evaluator of phi/psi pairs from a coordinate frame."""

    def evaluate(self, site: DihedralSite, positions) -> DihedralAngle:
        """
        Compute the phi/psi pair of one site.

        Args:
            site: Backbone atom indices of the residue
            positions: Array-like of shape (n_atoms, 3) for the current frame.
                It is only read.

        Returns:
            DihedralAngle in degrees

        Raises:
            IndexOutOfRangeError: If the site references an atom beyond the frame
        """
        coords = self._as_frame(positions)
        size = coords.shape[0]
        for index in site.indices:
            if index >= size or index < 0:
                raise IndexOutOfRangeError(index, size, "DihedralEvaluator.evaluate")
        phi = dihedral(*(coords[i] for i in site.phi_indices))
        psi = dihedral(*(coords[i] for i in site.psi_indices))
        return DihedralAngle(phi=float(np.degrees(phi)), psi=float(np.degrees(psi)))

    def evaluate_all(
        self, sites: Sequence[DihedralSite], positions
    ) -> List[DihedralAngle]:
        """Evaluate every site against the same frame, keeping order."""
        if sites is None:
            raise NilInputError("dihedral sites", "DihedralEvaluator.evaluate_all")
        coords = self._as_frame(positions)
        return [self.evaluate(site, coords) for site in sites]

    def evaluate_frames(
        self, sites: Sequence[DihedralSite], frames: Iterable
    ) -> List[List[DihedralAngle]]:
        """Evaluate the same sites for each frame of a trajectory."""
        return [self.evaluate_all(sites, frame) for frame in frames]

    @staticmethod
    def _as_frame(positions) -> np.ndarray:
        if positions is None:
            raise NilInputError("coordinates", "DihedralEvaluator.evaluate")
        coords = np.asarray(positions, dtype=float)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ValueError(
                f"Coordinates must have shape (n_atoms, 3), got {coords.shape}"
            )
        return coords
