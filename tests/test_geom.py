import numpy as np
import pytest

from bgjk.geom import ORIGIN, Vec3, as_hull, cross, cross3, dcross3, dot, sub


def test_components_are_float32():
    v = Vec3(1, 2.5, -3)
    assert all(isinstance(c, np.float32) for c in v)
    assert tuple(v) == (1.0, 2.5, -3.0)

def test_single_precision_rounding():
    # 0.1 не представляється точно; зберігається найближче float32
    assert Vec3(0.1, 0.0, 0.0).x == np.float32(0.1)
    assert float(Vec3(0.1, 0.0, 0.0).x) != 0.1

def test_exact_equality():
    assert Vec3(0, 0, 0) == ORIGIN
    assert Vec3(1, 1, 1) == Vec3.ones()
    assert Vec3(1, 1, 1) != Vec3(1, 1, 1.0000001)

def test_neg_and_sub():
    a = Vec3(1, -2, 3)
    b = Vec3(0.5, 0.5, 0.5)
    assert -a == Vec3(-1, 2, -3)
    assert a - b == Vec3(0.5, -2.5, 2.5)
    assert sub(a, b) == a - b

def test_dot():
    assert dot(Vec3(1, 2, 3), Vec3(4, -5, 6)) == 12.0
    assert Vec3(1, 2, 3).dot(Vec3(4, -5, 6)) == 12.0

def test_cross_right_handed():
    x, y, z = Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)
    assert cross(x, y) == z
    assert cross(y, z) == x
    assert cross(z, x) == y
    assert cross(y, x) == -z

def test_triple_cross():
    a, b, c = Vec3(1, 2, 0), Vec3(0, 1, 3), Vec3(2, 0, 1)
    assert cross3(a, b, c) == cross(cross(a, b), c)

def test_dcross3_points_toward_reference():
    # ребро вздовж x, опорна точка над ним -> напрям до неї, перпендикулярно ребру
    edge = Vec3(2, 0, 0)
    to_ref = Vec3(-1, 3, 0)
    d = dcross3(edge, to_ref)
    assert dot(d, edge) == 0.0
    assert dot(d, to_ref) > 0
    assert d == Vec3(0, 12, 0)

def test_dcross3_degenerates_on_collinear_input():
    assert dcross3(Vec3(1, 1, 1), Vec3(-2, -2, -2)) == ORIGIN


def test_as_hull_from_tuples_and_vec3():
    arr = as_hull([(0, 0, 0), Vec3(1, 2, 3)])
    assert arr.dtype == np.float32
    assert arr.shape == (2, 3)
    np.testing.assert_array_equal(arr[1], [1, 2, 3])

def test_as_hull_empty():
    assert as_hull([]).shape == (0, 3)
    assert as_hull(np.empty((0, 3))).shape == (0, 3)

def test_as_hull_keeps_float32_array():
    arr = np.ones((4, 3), dtype=np.float32)
    assert as_hull(arr) is arr

@pytest.mark.parametrize("bad", [[(1, 2)], [(1, 2, 3, 4)], np.zeros((2, 2, 3))])
def test_as_hull_rejects_malformed(bad):
    with pytest.raises(ValueError):
        as_hull(bad)
