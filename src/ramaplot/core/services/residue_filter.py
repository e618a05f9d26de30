"""Service filtering dihedral sites by residue name."""

import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..domain.errors import LengthMismatchError, NilInputError
from ..domain.models.dihedral_site import DihedralSite

logger = logging.getLogger(__name__)

# Remap value of a site that did not survive filtering.
EXCLUDED = -1


class ResidueFilter:
    """Filters dihedral sites in or out by residue name (e.g. only GLY)."""

    def filter(
        self,
        sites: Sequence[DihedralSite],
        names: Iterable[str],
        keep_if_present: bool = True,
    ) -> Tuple[List[DihedralSite], List[int]]:
        """
        Keep the sites whose residue name membership matches ``keep_if_present``.

        Args:
            sites: Sites to filter
            names: Three-letter residue names to test against
            keep_if_present: Keep residues named in ``names`` when True,
                everything else when False

        Returns:
            Tuple containing:
            - The retained sites, in their original relative order
            - A remap list as long as ``sites`` giving each site's index in
              the retained list, or -1 if it was dropped
        """
        if sites is None or names is None:
            raise NilInputError("sites or residue names", "ResidueFilter.filter")
        name_set = set(names)
        kept: List[DihedralSite] = []
        remap: List[int] = []
        for site in sites:
            is_present = site.residue_name in name_set
            if is_present == keep_if_present:
                remap.append(len(kept))
                kept.append(site)
            else:
                remap.append(EXCLUDED)
        logger.debug(
            "Residue filter %s %s kept %d of %d sites",
            "in" if keep_if_present else "out",
            sorted(name_set),
            len(kept),
            len(sites),
        )
        return kept, remap

    def split(
        self, sites: Sequence[DihedralSite], names: Iterable[str]
    ) -> Tuple[Tuple[List[DihedralSite], List[int]], Tuple[List[DihedralSite], List[int]]]:
        """Return the complementary (present, absent) filter results."""
        names = set(names)
        return self.filter(sites, names, True), self.filter(sites, names, False)

    @staticmethod
    def remap_tags(tags: Optional[Iterable[int]], remap: Sequence[int]) -> Set[int]:
        """
        Translate tag indices of the original list into the filtered list.

        Tags pointing at dropped sites or outside the original list vanish.
        """
        if not tags:
            return set()
        return {
            remap[tag]
            for tag in tags
            if 0 <= tag < len(remap) and remap[tag] != EXCLUDED
        }

    @staticmethod
    def check_parallel(series_count: int, parallel: Optional[Sequence], what: str) -> None:
        """
        Require a caller-supplied parallel list to cover every series.

        Raises:
            LengthMismatchError: If ``parallel`` has fewer entries than series
        """
        if parallel is not None and len(parallel) < series_count:
            raise LengthMismatchError(
                series_count,
                len(parallel),
                function="ResidueFilter.check_parallel",
                detail=f"{what} needs an entry (which may be None) per series",
            )
