import pytest

from objweld.errors import EmptyBoundingBoxError
from objweld.geometry.bounds import compute_bounds
from objweld.types import BoundingBox


def test_bounds_cover_every_position():
    pts = [(1.0, -2.0, 3.0), (-4.0, 5.0, 0.5), (0.0, 0.0, -6.0)]

    box = compute_bounds(pts)

    assert not box.is_empty
    assert box.minimum == (-4.0, -2.0, -6.0)
    assert box.maximum == (1.0, 5.0, 3.0)
    assert all(box.contains(p) for p in pts)


def test_single_point_box():
    box = compute_bounds([(1.0, 2.0, 3.0)])

    assert box.minimum == box.maximum == (1.0, 2.0, 3.0)
    assert box.extents == (0.0, 0.0, 0.0)
    assert box.center == (1.0, 2.0, 3.0)


def test_no_positions_gives_explicit_empty_box():
    box = compute_bounds([])

    assert box.is_empty
    assert box == BoundingBox.empty_box()
    assert not box.contains((0.0, 0.0, 0.0))


@pytest.mark.parametrize("attr", ["center", "extents"])
def test_empty_box_geometry_raises(attr):
    with pytest.raises(EmptyBoundingBoxError):
        getattr(BoundingBox.empty_box(), attr)


def test_empty_box_as_tuple_raises():
    with pytest.raises(EmptyBoundingBoxError):
        BoundingBox.empty_box().as_tuple()


def test_union():
    a = compute_bounds([(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)])
    b = compute_bounds([(-1.0, 0.5, 2.0)])

    u = a.union(b)

    assert u.minimum == (-1.0, 0.0, 0.0)
    assert u.maximum == (1.0, 1.0, 2.0)
    assert BoundingBox.empty_box().union(a) == a
    assert a.union(BoundingBox.empty_box()) == a
