"""Adapter for MDTraj topologies and trajectories."""

import logging
import string
from typing import Iterator, Optional

import mdtraj as md
import numpy as np

from ...core.domain.errors import IndexOutOfRangeError, NilInputError
from ...core.domain.models.atom import NO_CHAIN, Atom, AtomSequence
from ...core.domain.models.structure import Structure

logger = logging.getLogger(__name__)

NM_TO_ANGSTROM = 10.0


class MDTrajAdapter:
    """Adapter exposing MDTraj data as atom sequences and coordinate frames."""

    def load(self, path: str, top: Optional[str] = None) -> md.Trajectory:
        """
        Load a structure or trajectory file with MDTraj.

        Args:
            path: Structure or trajectory file
            top: Topology file, needed for coordinate-only formats (xtc, dcd)

        Returns:
            MDTraj Trajectory object
        """
        if top is not None:
            traj = md.load(path, top=top)
        else:
            traj = md.load(path)
        logger.info(
            "Loaded %s: %d atoms, %d frames", path, traj.n_atoms, traj.n_frames
        )
        return traj

    def atom_sequence(self, topology: md.Topology) -> AtomSequence:
        """
        Convert an MDTraj topology to an AtomSequence, in topology order.

        Chains without an id are named by their index (A, B, ...).
        """
        if topology is None:
            raise NilInputError("topology", "MDTrajAdapter.atom_sequence")
        return AtomSequence(
            Atom(
                chain_id=self._chain_id(atom.residue.chain),
                atom_name=atom.name,
                residue_id=int(atom.residue.resSeq),
                residue_name=atom.residue.name,
            )
            for atom in topology.atoms
        )

    def positions(self, traj: md.Trajectory, frame: int = 0) -> np.ndarray:
        """Coordinates of one frame in Angstrom, shape (n_atoms, 3)."""
        if not 0 <= frame < traj.n_frames:
            raise IndexOutOfRangeError(frame, traj.n_frames, "MDTrajAdapter.positions")
        return np.asarray(traj.xyz[frame], dtype=float) * NM_TO_ANGSTROM

    def frames(self, traj: md.Trajectory) -> Iterator[np.ndarray]:
        for frame in range(traj.n_frames):
            yield self.positions(traj, frame)

    def to_structure(self, traj: md.Trajectory, source_file: str = "") -> Structure:
        """Bundle a trajectory's topology and all its frames."""
        return Structure(
            atoms=self.atom_sequence(traj.topology),
            frames=list(self.frames(traj)),
            source_file=source_file,
        )

    @staticmethod
    def _chain_id(chain) -> str:
        chain_id = getattr(chain, "chain_id", None)
        if chain_id is not None and str(chain_id).strip():
            return str(chain_id)
        if chain_id is not None:
            return NO_CHAIN
        return string.ascii_uppercase[chain.index % len(string.ascii_uppercase)]
