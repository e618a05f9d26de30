"""Domain model for the backbone atoms defining one residue's phi/psi pair."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DihedralSite:
    """
    Indices of the five backbone atoms needed for a residue's phi and psi.

    The indices point into the AtomSequence that was scanned; the site does
    not own any atom data.
    """

    prev_c: int
    n: int
    ca: int
    c: int
    next_n: int
    residue_id: int
    residue_name: str

    @property
    def phi_indices(self) -> Tuple[int, int, int, int]:
        return (self.prev_c, self.n, self.ca, self.c)

    @property
    def psi_indices(self) -> Tuple[int, int, int, int]:
        return (self.n, self.ca, self.c, self.next_n)

    @property
    def indices(self) -> Tuple[int, int, int, int, int]:
        return (self.prev_c, self.n, self.ca, self.c, self.next_n)
