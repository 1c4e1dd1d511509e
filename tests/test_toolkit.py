import numpy as np
import pytest
from numpy.testing import assert_allclose
from roibridge import toolkit as tk
from roibridge.toolkit import _path
from roibridge.types import Rect

RT = tk.RoiType


@pytest.mark.parametrize(
    "r, is_area, is_line",
    [
        (tk.Roi(0, 0, 4, 3), True, False),
        (tk.Roi(0, 0, 4, 3, corner_diameter=1), True, False),
        (tk.OvalRoi(0, 0, 4, 3), True, False),
        (tk.Line(0, 0, 4, 3), False, True),
        (tk.PolygonRoi([0, 1, 1], [0, 0, 1]), True, False),
        (tk.PolygonRoi([0, 1, 1], [0, 0, 1], type=RT.FREEROI), True, False),
        (tk.PolygonRoi([0, 1, 1], [0, 0, 1], type=RT.TRACED_ROI), True, False),
        (tk.PolygonRoi([0, 1, 1], [0, 0, 1], type=RT.POLYLINE), False, True),
        (tk.PolygonRoi([0, 1, 1], [0, 0, 1], type=RT.FREELINE), False, True),
        (tk.PolygonRoi([0, 1, 1], [0, 0, 1], type=RT.ANGLE), False, False),
        (tk.PointRoi([0, 1], [0, 1]), False, False),
        (tk.ShapeRoi(_path.polygon_path([0, 1, 1], [0, 0, 1])), True, False),
    ],
)
def test_area_and_line_predicates(r: tk.ToolkitRoi, is_area: bool, is_line: bool):
    assert r.is_area() is is_area
    assert r.is_line() is is_line

def test_type_name():
    assert tk.type_name(RT.FREELINE) == "FREELINE"
    assert tk.type_name(42) == "42"
    assert tk.type_name(tk.UNKNOWN_TYPE) == "UNKNOWN"

def test_polygon_roi_validation():
    with pytest.raises(ValueError):
        tk.PolygonRoi([0, 1], [0, 1], type=RT.OVAL)
    with pytest.raises(ValueError):
        tk.PolygonRoi([0, 1, 2], [0, 1])
    with pytest.raises(ValueError):
        tk.PolygonRoi([0, 1], [0, 1], type=RT.POINT)

def test_polygon_roi_copies_coordinates():
    r = tk.PolygonRoi([0, 4, 4], [0, 0, 3])
    xs, ys = r.float_polygon()
    xs[0] = 100
    assert r.float_polygon()[0][0] == 0
    assert r.n_coordinates == 3
    assert r.bounds() == Rect(0, 0, 4, 3)
    assert r.contains(3, 1)
    assert not r.contains(1, 2)

def test_line():
    r = tk.Line(4, 5, 1, 1)
    assert r.length() == pytest.approx(5)
    assert r.bounds() == Rect(1, 1, 3, 4)
    assert r.x_base == 1
    assert not r.contains(2, 2)
    with pytest.raises(TypeError):
        r.to_shape()

def test_oval_contains():
    r = tk.OvalRoi(0, 0, 10, 4)
    assert r.contains(5, 2)
    assert not r.contains(0.5, 0.5)
    shape = r.to_shape()
    assert shape.contains(5, 2)
    assert not shape.contains(0.5, 0.5)

def test_rounded_rectangle():
    r = tk.Roi(10, 20, 40, 30, corner_diameter=8)
    assert r.corner_diameter == 8
    assert r.contains(30, 35)
    assert r.contains(11, 35)
    assert not r.contains(10.5, 20.5)
    assert tk.Roi(10, 20, 40, 30).contains(10.5, 20.5)
    shape = r.to_shape()
    assert shape.bounds() == Rect(10, 20, pytest.approx(40), pytest.approx(30))

def test_shape_roi_base():
    path = _path.path_from_rings([[[10, 20], [30, 20], [30, 50], [10, 50]]])
    r = tk.ShapeRoi(path, name="shape")
    assert r.name == "shape"
    assert r.x_base == 10
    assert r.y_base == 20
    assert_allclose(r.shape().vertices.min(axis=0), [0, 0])
    assert_allclose(r.absolute_path().vertices, path.vertices)
    assert not r.is_empty()
    assert r.to_shape() is r

def test_shape_roi_even_odd():
    path = _path.path_from_rings(
        [
            [[0, 0], [10, 0], [10, 10], [0, 10]],
            [[2, 2], [8, 2], [8, 8], [2, 8]],
            [[20, 0], [25, 0], [25, 5], [20, 5]],
        ]
    )
    r = tk.ShapeRoi(path)
    assert r.contains(1, 1)
    assert not r.contains(5, 5)
    assert r.contains(22, 2)
    assert not r.contains(15, 2)
    assert len(_path.rings_from_path(r.shape())) == 3

def test_empty_shape_roi():
    r = tk.ShapeRoi(_path.empty_path())
    assert r.is_empty()
    assert r.bounds() == Rect(0, 0, 0, 0)
    assert not r.contains(0, 0)

def test_transform_path():
    path = _path.polygon_path([0, 2, 2], [0, 0, 1])
    out = _path.transform_path(path, (2, 0, 0, 3, 1, -1))
    rings = _path.rings_from_path(out)
    assert len(rings) == 1
    assert_allclose(rings[0], np.array([[1, -1], [5, -1], [5, 2]]))
