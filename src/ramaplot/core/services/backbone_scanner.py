# src/ramaplot/core/services/backbone_scanner.py
"""Service resolving the backbone atoms of each residue's phi/psi pair."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..domain.errors import BackboneInconsistencyError, NilInputError
from ..domain.models.atom import NO_CHAIN, Atom, AtomSequence
from ..domain.models.dihedral_site import DihedralSite
from ..domain.models.residue_selector import ResidueSelector

logger = logging.getLogger(__name__)


@dataclass
class BackboneWindow:
    """
    The five atom slots of one phi/psi pair, as indices into the scanned
    sequence. ``None`` marks an unfilled slot.
    """

    prev_c: Optional[int] = None
    n: Optional[int] = None
    ca: Optional[int] = None
    c: Optional[int] = None
    next_n: Optional[int] = None

    def reset(self) -> None:
        self.prev_c = self.n = self.ca = self.c = self.next_n = None

    @property
    def complete(self) -> bool:
        return None not in (self.prev_c, self.n, self.ca, self.c, self.next_n)

    def place(self, index: int, atom: Atom, atoms: AtomSequence) -> None:
        """
        Bind an atom to the slot its name calls for.

        Apart from the first C, an atom is only bound when its residue id is
        greater than that of the atom in ``prev_c``, so atoms already
        consumed by an earlier window are never reused.
        """
        name = atom.atom_name
        if name == "C" and self.prev_c is None:
            self.prev_c = index
        ahead = (
            self.prev_c is not None
            and atom.residue_id > atoms[self.prev_c].residue_id
        )
        if name == "N" and ahead and self.n is None:
            self.n = index
        if name == "C" and ahead:
            self.c = index
        if name == "CA" and ahead:
            self.ca = index
        if (
            name == "N"
            and self.ca is not None
            and atom.residue_id > atoms[self.ca].residue_id
        ):
            self.next_n = index

    def slide(self) -> None:
        """Move to the next residue, reusing the shared boundary atoms."""
        self.prev_c, self.n = self.c, self.next_n
        self.ca = self.c = self.next_n = None


class BackboneScanner:
    """Single-pass scanner turning an atom sequence into dihedral sites."""

    def scan(
        self,
        atoms: AtomSequence,
        chains: Optional[Iterable[str]] = None,
        selector: Optional[ResidueSelector] = None,
    ) -> List[DihedralSite]:
        """
        Resolve the phi/psi backbone atoms of every selected residue.

        Args:
            atoms: Atoms in file order
            chains: Chain ids to include; empty or None includes all chains.
                Atoms without a chain (``NO_CHAIN``) are always included.
            selector: Residues to emit, by the residue id of N. Defaults to
                every residue.

        Returns:
            Dihedral sites in scan order

        Raises:
            NilInputError: If no atom sequence is given
            BackboneInconsistencyError: If a resolved window has residue ids
                that do not follow each other; no sites are returned
        """
        if atoms is None:
            raise NilInputError("atom sequence", "BackboneScanner.scan")
        if selector is None:
            selector = ResidueSelector.all()
        chain_filter = frozenset(chains or ())

        sites: List[DihedralSite] = []
        window = BackboneWindow()
        previous_chain: Optional[str] = None
        for index, atom in enumerate(atoms):
            if (
                chain_filter
                and atom.chain_id not in chain_filter
                and atom.chain_id != NO_CHAIN
            ):
                continue
            if atom.chain_id != previous_chain:
                if previous_chain is not None:
                    logger.debug(
                        "Chain break at atom %d: %r -> %r",
                        index,
                        previous_chain,
                        atom.chain_id,
                    )
                previous_chain = atom.chain_id
                window.reset()

            window.place(index, atom, atoms)
            if not window.complete:
                continue

            site = self._resolve(window, atoms)
            if selector.selects(site.residue_id):
                sites.append(site)
            window.slide()

        logger.info("Resolved %d dihedral sites from %d atoms", len(sites), len(atoms))
        return sites

    @staticmethod
    def _resolve(window: BackboneWindow, atoms: AtomSequence) -> DihedralSite:
        """Check the residue-id arithmetic of a full window and build its site."""
        prev_c_id = atoms[window.prev_c].residue_id
        n_id = atoms[window.n].residue_id
        ca_id = atoms[window.ca].residue_id
        c_id = atoms[window.c].residue_id
        next_n_id = atoms[window.next_n].residue_id
        if (
            prev_c_id != n_id - 1
            or n_id != ca_id
            or ca_id != c_id
            or c_id != next_n_id - 1
        ):
            raise BackboneInconsistencyError(
                prev_c_id,
                n_id - 1,
                ca_id,
                c_id,
                next_n_id - 1,
                indices=(window.prev_c, window.n, window.ca, window.c, window.next_n),
                function="BackboneScanner.scan",
            )
        return DihedralSite(
            prev_c=window.prev_c,
            n=window.n,
            ca=window.ca,
            c=window.c,
            next_n=window.next_n,
            residue_id=n_id,
            residue_name=atoms[window.ca].residue_name,
        )
