import pytest

from conftest import make_residues
from ramaplot.core.domain.errors import ErrorKind, LengthMismatchError, NilInputError
from ramaplot.core.domain.models.atom import AtomSequence
from ramaplot.core.services.backbone_scanner import BackboneScanner
from ramaplot.core.services.residue_filter import EXCLUDED, ResidueFilter

NAMES = ["MET", "GLY", "ALA", "GLY", "PRO", "GLY", "SER", "LYS"]


@pytest.fixture
def sites():
    return BackboneScanner().scan(AtomSequence(make_residues(NAMES)))


@pytest.fixture
def residue_filter():
    return ResidueFilter()


def test_keep_present(residue_filter, sites):
    kept, remap = residue_filter.filter(sites, {"GLY"}, True)

    assert [s.residue_name for s in kept] == ["GLY", "GLY", "GLY"]
    assert [s.residue_id for s in kept] == [2, 4, 6]
    assert remap == [0, EXCLUDED, 1, EXCLUDED, 2, EXCLUDED]


def test_keep_absent(residue_filter, sites):
    kept, remap = residue_filter.filter(sites, {"GLY", "PRO"}, False)

    assert [s.residue_name for s in kept] == ["ALA", "SER"]
    assert remap == [EXCLUDED, 0, EXCLUDED, EXCLUDED, EXCLUDED, 1]


@pytest.mark.parametrize("names", [set(), {"GLY"}, {"GLY", "PRO"}, {"TRP"}, set(NAMES)])
def test_complementary_filters_partition(residue_filter, sites, names):
    kept_in, remap_in = residue_filter.filter(sites, names, True)
    kept_out, remap_out = residue_filter.filter(sites, names, False)

    assert len(remap_in) == len(remap_out) == len(sites)
    assert len(kept_in) + len(kept_out) == len(sites)
    for index in range(len(sites)):
        assert (remap_in[index] == EXCLUDED) != (remap_out[index] == EXCLUDED)
    for kept, remap in ((kept_in, remap_in), (kept_out, remap_out)):
        positions = [r for r in remap if r != EXCLUDED]
        assert positions == list(range(len(kept)))
        for index, new in enumerate(remap):
            if new != EXCLUDED:
                assert kept[new] is sites[index]


def test_split_matches_filter(residue_filter, sites):
    present, absent = residue_filter.split(sites, ["GLY"])
    assert present == residue_filter.filter(sites, {"GLY"}, True)
    assert absent == residue_filter.filter(sites, {"GLY"}, False)


def test_empty_site_list(residue_filter):
    assert residue_filter.filter([], {"GLY"}, True) == ([], [])


def test_nil_input(residue_filter, sites):
    with pytest.raises(NilInputError):
        residue_filter.filter(None, {"GLY"}, True)
    with pytest.raises(NilInputError):
        residue_filter.filter(sites, None, True)


def test_remap_tags(residue_filter, sites):
    _, remap = residue_filter.filter(sites, {"GLY"}, True)

    assert residue_filter.remap_tags({0, 1, 4}, remap) == {0, 2}
    assert residue_filter.remap_tags({99, -3}, remap) == set()
    assert residue_filter.remap_tags(None, remap) == set()


def test_check_parallel():
    ResidueFilter.check_parallel(2, None, "tag sets")
    ResidueFilter.check_parallel(2, [None, {1}, {2}], "tag sets")

    with pytest.raises(LengthMismatchError) as excinfo:
        ResidueFilter.check_parallel(3, [{0}], "tag sets")
    assert excinfo.value.kind is ErrorKind.LENGTH_MISMATCH
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 1
    assert isinstance(excinfo.value, ValueError)
