#!/usr/bin/env python3
# src/ramaplot/core/domain/models/atom.py

"""
Domain model representing an atom of a biomolecular topology.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple, Union, overload

# Chain marker used by structures that do not assign chains. Atoms carrying
# it are accepted by every chain filter.
NO_CHAIN = " "


@dataclass(frozen=True)
class Atom:
    """Represents an atom in a molecular topology."""

    chain_id: str
    atom_name: str
    residue_id: int
    residue_name: str = ""


class AtomSequence(Sequence[Atom]):
    """
    Ordered, read-only sequence of atoms.

    The order is the file (deposition) order of the topology, which is not
    guaranteed to follow the spatial order of the chain.
    """

    def __init__(self, atoms: Iterable[Atom]):
        self._atoms: Tuple[Atom, ...] = tuple(atoms)

    @overload
    def __getitem__(self, index: int) -> Atom:
        ...

    @overload
    def __getitem__(self, index: slice) -> "AtomSequence":
        ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return AtomSequence(self._atoms[index])
        return self._atoms[index]

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._atoms)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AtomSequence):
            return self._atoms == other._atoms
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._atoms)

    def __repr__(self) -> str:
        return f"AtomSequence({len(self._atoms)} atoms)"

    def chains(self) -> Tuple[str, ...]:
        """Return chain ids in order of first appearance."""
        seen = []
        for atom in self._atoms:
            if atom.chain_id not in seen:
                seen.append(atom.chain_id)
        return tuple(seen)
