import numpy
import pytest

from spgeom import (
    space, size, margin, contains_point, contains_rect, intersect, enlarge,
    bounding_box, bounding_box_n,
)

S2 = space(2)
S3 = space(3)
Point, Rect = S3.Point, S3.Rect


@pytest.fixture
def cube():
    return Rect(Point(0, 0, 0), [2, 2, 2])


def random_rects(n, seed=0):
    rng = numpy.random.RandomState(seed)
    lows = rng.uniform(-5, 5, size=(n, 3))
    lengths = rng.uniform(0.5, 4, size=(n, 3))
    return [Rect(low, length) for low, length in zip(lows, lengths)]


def test_size(cube):
    assert size(cube) == 8.
    assert Rect(Point(1, 1, 1), [1, 2, 3]).size() == 6.
    assert S2.Rect([0, 0], [0.5, 4]).size() == 2.


def test_margin(cube):
    assert margin(cube) == 24.
    assert Rect(Point(0, 0, 0), [1, 2, 3]).margin() == 24.


@pytest.mark.parametrize("dim, expected", [(1, 3.), (2, 12.), (4, 96.)])
def test_margin_scales_with_dimension(dim, expected):
    S = space(dim)
    r = S.Rect([0] * dim, [3] * dim)
    assert margin(r) == expected


def test_contains_point(cube):
    assert contains_point(cube, Point(1, 1, 1))
    assert contains_point(cube, Point(0, 2, 1))
    assert not contains_point(cube, Point(1, 1, 2.0001))
    assert not cube.contains_point(Point(-1, 1, 1))


def test_contains_rect(cube):
    assert contains_rect(cube, Rect(Point(0.5, 0.5, 0.5), [1, 1, 1]))
    assert contains_rect(cube, cube)
    assert contains_rect(cube, Rect(Point(0, 0, 0), [2, 1, 2]))
    assert not cube.contains_rect(Rect(Point(1, 1, 1), [2, 0.5, 0.5]))
    big = Rect(Point(-1, -1, -1), [4, 4, 4])
    assert not contains_rect(cube, big)
    assert contains_rect(big, cube)


def test_intersect(cube):
    assert intersect(cube, Rect(Point(1, 1, 1), [2, 2, 2]))
    assert intersect(cube, Rect(Point(0.5, 0.5, 0.5), [1, 1, 1]))
    assert intersect(cube, Rect(Point(-1, -1, -1), [4, 4, 4]))
    assert not intersect(cube, Rect(Point(3, 0, 0), [1, 1, 1]))
    # Overlapping on two axes only.
    assert not cube.intersects(Rect(Point(1, 1, 5), [1, 1, 1]))


def test_touching_faces_do_not_intersect(cube):
    right = Rect(Point(2, 0.5, 0.5), [1, 1, 1])
    left = Rect(Point(-1, 0.5, 0.5), [1, 1, 1])
    assert not intersect(cube, right)
    assert not intersect(right, cube)
    assert not intersect(left, cube)
    corner = Rect(Point(2, 2, 2), [1, 1, 1])
    assert not intersect(cube, corner)


def test_intersect_is_symmetric():
    rects = random_rects(40, seed=1)
    for r1 in rects:
        for r2 in rects:
            assert intersect(r1, r2) == intersect(r2, r1)


def test_enlarge(cube):
    enlarge(cube, Rect(Point(1, -1, 1), [3, 1, 0.5]))
    assert cube == Rect(Point(0, -1, 0), [4, 3, 2])


def test_enlarge_with_contained_rect_is_noop(cube):
    inner = Rect(Point(0.5, 0.5, 0), [1, 1, 2])
    cube.enlarge(inner)
    cube.enlarge(inner)
    assert cube == Rect(Point(0, 0, 0), [2, 2, 2])


def test_enlarge_returns_none(cube):
    assert enlarge(cube, cube.copy()) is None


def test_enlarge_leaves_argument_untouched(cube):
    other = Rect(Point(5, 5, 5), [1, 1, 1])
    cube.enlarge(other)
    assert other == Rect(Point(5, 5, 5), [1, 1, 1])


def test_enlarge_is_seen_by_views(cube):
    mins = cube.mins
    cube.enlarge(Rect(Point(-1, 0, 0), [1, 1, 1]))
    assert mins[0] == -1.


def test_bounding_box(cube):
    other = Rect(Point(3, -1, 0.5), [1, 1, 1])
    bb = bounding_box(cube, other)
    assert bb == Rect(Point(0, -1, 0), [4, 3, 2])
    assert isinstance(bb, Rect)
    assert cube == Rect(Point(0, 0, 0), [2, 2, 2])
    assert other == Rect(Point(3, -1, 0.5), [1, 1, 1])
    assert cube.bounding_box(other) == bb


def test_bounding_box_contains_both():
    rects = random_rects(30, seed=2)
    for r1, r2 in zip(rects, rects[1:]):
        bb = bounding_box(r1, r2)
        assert contains_rect(bb, r1)
        assert contains_rect(bb, r2)


def test_bounding_box_is_fresh(cube):
    bb = bounding_box(cube, cube)
    assert bb == cube and bb is not cube
    bb.enlarge(Rect(Point(5, 5, 5), [1, 1, 1]))
    assert cube == Rect(Point(0, 0, 0), [2, 2, 2])


def test_bounding_box_n():
    rects = random_rects(10, seed=3)
    bb = bounding_box_n(*rects)
    assert all(contains_rect(bb, r) for r in rects)
    assert bb.mins.tolist() == numpy.min([r.mins for r in rects], 0).tolist()
    assert bb.maxs.tolist() == numpy.max([r.maxs for r in rects], 0).tolist()


def test_bounding_box_n_pair(cube):
    other = Rect(Point(1, 1, 1), [2, 2, 2])
    assert bounding_box_n(cube, other) == bounding_box(cube, other)


def test_bounding_box_n_single_is_input(cube):
    bb = bounding_box_n(cube)
    assert bb == cube
    assert bb is cube


def test_bounding_box_n_empty():
    with pytest.raises(ValueError):
        bounding_box_n()
