"""Selection of residues by id for dihedral extraction."""

from typing import Iterable, Optional, Tuple

# Upper bound value meaning "up to the end of the chain".
OPEN_END = -1


class ResidueSelector:
    """
    Selects residues by id.

    Two tests are OR'd together. When exactly two ids are given they define
    an inclusive range ``[ids[0], ids[1]]``, where an upper bound of
    ``OPEN_END`` (-1) leaves the range open. Independently of that, any
    residue whose id appears in ``ids`` is selected.
    """

    def __init__(self, ids: Iterable[int]):
        self._ids: Tuple[int, ...] = tuple(int(i) for i in ids)
        self._range: Optional[Tuple[int, Optional[int]]] = None
        if len(self._ids) == 2:
            start, end = self._ids
            self._range = (start, None if end == OPEN_END else end)

    @classmethod
    def all(cls) -> "ResidueSelector":
        """Selector accepting every residue id."""
        selector = cls(())
        selector._range = (-(2**63), None)
        return selector

    @classmethod
    def from_range(cls, start: int, end: int = OPEN_END) -> "ResidueSelector":
        return cls((start, end))

    @property
    def ids(self) -> Tuple[int, ...]:
        return self._ids

    def selects(self, residue_id: int) -> bool:
        if self._range is not None:
            start, end = self._range
            if residue_id >= start and (end is None or residue_id <= end):
                return True
        return residue_id in self._ids

    def __contains__(self, residue_id: int) -> bool:
        return self.selects(residue_id)

    def __repr__(self) -> str:
        return f"ResidueSelector(ids={self._ids}, range={self._range})"
