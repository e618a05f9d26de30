import pytest

from ramaplot.core.domain.errors import ErrorKind, TooManyTagsError
from ramaplot.core.domain.models.plot_point import Shape
from ramaplot.core.services.shape_tagger import (
    DEFAULT_SHAPE,
    MAX_TAGS,
    ShapeTagger,
    shape_for,
)


def test_four_distinct_shapes():
    shapes = [shape_for(rank) for rank in range(MAX_TAGS)]
    assert shapes == [Shape.PYRAMID, Shape.CIRCLE, Shape.SQUARE, Shape.CROSS]
    assert DEFAULT_SHAPE not in shapes


@pytest.mark.parametrize("rank", [4, 5, 50])
def test_rank_beyond_four_is_refused(rank):
    with pytest.raises(TooManyTagsError) as excinfo:
        shape_for(rank)
    assert excinfo.value.kind is ErrorKind.TOO_MANY_TAGS
    assert excinfo.value.rank == rank
    assert not excinfo.value.critical


def test_fifth_tag_in_a_series():
    tagger = ShapeTagger()
    tagged = [tagger.tag() for _ in range(4)]

    with pytest.raises(TooManyTagsError):
        tagger.tag()

    assert [rank for rank, _ in tagged] == [0, 1, 2, 3]
    assert len({shape for _, shape in tagged}) == 4
    assert tagger.tagged == 5


def test_taggers_are_independent():
    first, second = ShapeTagger(), ShapeTagger()
    first.tag()
    first.tag()
    assert second.tag() == (0, Shape.PYRAMID)
