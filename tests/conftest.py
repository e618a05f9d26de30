"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pytest

from ramaplot.core.domain.models.atom import Atom, AtomSequence

BACKBONE_NAMES = ("N", "CA", "C", "O")
ELEMENTS = {"N": "N", "CA": "C", "C": "C", "O": "O", "CB": "C", "H": "H", "OXT": "O"}


def make_residues(
    residue_names: Sequence[str],
    chain: str = "A",
    start: int = 1,
    atom_names: Sequence[str] = BACKBONE_NAMES,
    residue_ids: Optional[Sequence[int]] = None,
) -> List[Atom]:
    """Atoms of consecutive residues, in file order."""
    if residue_ids is None:
        residue_ids = range(start, start + len(residue_names))
    return [
        Atom(chain_id=chain, atom_name=name, residue_id=residue_id, residue_name=resname)
        for resname, residue_id in zip(residue_names, residue_ids)
        for name in atom_names
    ]


def random_walk(n_atoms: int, seed: int = 0) -> np.ndarray:
    """Non-degenerate coordinates, 1.5 A between consecutive atoms."""
    rng = np.random.default_rng(seed)
    steps = rng.normal(size=(n_atoms, 3))
    steps /= np.linalg.norm(steps, axis=1)[:, None]
    return np.cumsum(steps * 1.5, axis=0)


def write_pdb(path: Path, atoms: Sequence[Atom], frames: Sequence[np.ndarray]) -> Path:
    """Write atoms as a multi-model PDB file."""
    lines = []
    for model, coords in enumerate(frames, start=1):
        lines.append(f"MODEL     {model:4d}")
        for serial, (atom, xyz) in enumerate(zip(atoms, coords), start=1):
            name = atom.atom_name if len(atom.atom_name) == 4 else f" {atom.atom_name:<3s}"
            element = ELEMENTS.get(atom.atom_name, atom.atom_name[0])
            lines.append(
                f"ATOM  {serial:5d} {name} {atom.residue_name:>3s} {atom.chain_id:1s}"
                f"{atom.residue_id:4d}    {xyz[0]:8.3f}{xyz[1]:8.3f}{xyz[2]:8.3f}"
                f"  1.00  0.00          {element:>2s}"
            )
        lines.append("ENDMDL")
    lines.append("END")
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def pentapeptide() -> AtomSequence:
    """Five complete residues on chain A."""
    return AtomSequence(make_residues(["MET", "GLY", "ALA", "PRO", "LYS"]))


@pytest.fixture
def two_chains() -> AtomSequence:
    """Two four-residue chains, A then B."""
    return AtomSequence(
        make_residues(["ALA", "GLY", "SER", "VAL"], chain="A")
        + make_residues(["LEU", "GLY", "ASP", "GLU"], chain="B")
    )


@pytest.fixture
def pdb_file(tmp_path) -> Path:
    """Two-model PDB with six residues on chain A."""
    atoms = make_residues(["MET", "GLY", "ALA", "PRO", "GLY", "LYS"])
    frames = [random_walk(len(atoms), seed=1), random_walk(len(atoms), seed=2)]
    return write_pdb(tmp_path / "hexa.pdb", atoms, frames)
