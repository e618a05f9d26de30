# src/ramaplot/infrastructure/repositories/structure_repository.py
"""Repository reading PDB structures into atom sequences and frames."""

import logging
import os
from typing import Dict, List, Optional

import numpy as np
from Bio.PDB.PDBParser import PDBParser

from ...core.domain.errors import LengthMismatchError, NilInputError
from ...core.domain.models.atom import NO_CHAIN, Atom, AtomSequence
from ...core.domain.models.structure import Structure

logger = logging.getLogger(__name__)


class StructureRepository:
    """Repository for PDB structures; every MODEL becomes one frame."""

    def __init__(self, data_dir: str = "."):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing structure files
        """
        self._data_dir = data_dir
        self._parser = PDBParser(QUIET=True)
        self._cache: Dict[str, Structure] = {}

    def get(self, id: str) -> Optional[Structure]:
        """
        Retrieve a structure by ID (the PDB file name without extension).

        Returns:
            Structure, or None if no such file exists
        """
        file_path = os.path.join(self._data_dir, f"{id}.pdb")
        if not os.path.exists(file_path):
            return None
        return self.load(file_path)

    def list(self) -> Dict[str, Structure]:
        """Load every PDB file of the data directory, keyed by ID."""
        structures = {}
        for file_name in sorted(os.listdir(self._data_dir)):
            if file_name.endswith(".pdb"):
                id = os.path.splitext(file_name)[0]
                if structure := self.get(id):
                    structures[id] = structure
        return structures

    def load(self, file_path: str) -> Structure:
        """
        Parse a PDB file.

        The atom sequence is taken from the first model; each model
        contributes one coordinate frame.

        Raises:
            NilInputError: If the file contains no atoms
            LengthMismatchError: If models differ in atom count
        """
        if file_path in self._cache:
            return self._cache[file_path]

        id = os.path.splitext(os.path.basename(file_path))[0]
        pdb = self._parser.get_structure(id, file_path)
        models = list(pdb.get_models())
        if not models or not any(True for _ in models[0].get_atoms()):
            raise NilInputError(f"atoms in {file_path}", "StructureRepository.load")

        atoms = self._atom_sequence(models[0])
        frames: List[np.ndarray] = []
        for model in models:
            coords = np.array(
                [atom.get_coord() for atom in model.get_atoms()], dtype=float
            )
            if len(coords) != len(atoms):
                raise LengthMismatchError(
                    len(atoms),
                    len(coords),
                    function="StructureRepository.load",
                    detail=f"model {model.get_id()} of {file_path}",
                )
            frames.append(coords)

        structure = Structure(atoms=atoms, frames=frames, source_file=file_path)
        logger.info(
            "Loaded %s: %d atoms, %d models", file_path, len(atoms), len(frames)
        )
        self._cache[file_path] = structure
        return structure

    @staticmethod
    def _atom_sequence(model) -> AtomSequence:
        atoms = []
        for chain in model:
            chain_id = chain.get_id().strip() or NO_CHAIN
            for residue in chain:
                residue_id = residue.get_id()[1]
                residue_name = residue.get_resname()
                for atom in residue:
                    atoms.append(
                        Atom(
                            chain_id=chain_id,
                            atom_name=atom.get_name(),
                            residue_id=int(residue_id),
                            residue_name=residue_name,
                        )
                    )
        return AtomSequence(atoms)
