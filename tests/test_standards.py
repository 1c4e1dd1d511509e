import math
import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal
from pydantic import ValidationError
from roibridge.geometry import Contour, PlanarRegion
from roibridge.standards import roi
from roibridge.types import PlaneIndex, Point2D, Rect


def test_rectangle_roi():
    r0 = roi.RectangleRoi(x=2, y=3, width=4, height=5)
    assert r0.area() == 20
    assert r0.bbox() == Rect(2, 3, 4, 5)
    assert r0.contains(2, 3)
    assert not r0.contains(6, 3)
    assert r0.shifted(1, -1).bbox() == Rect(3, 2, 4, 5)
    assert r0.to_region().area() == pytest.approx(20)

def test_ellipse_roi():
    r0 = roi.EllipseRoi(x=0, y=0, width=10, height=4)
    assert r0.center() == Point2D(5, 2)
    assert r0.area() == pytest.approx(math.pi * 10)
    assert r0.contains(5, 2)
    assert not r0.contains(0.5, 0.5)
    assert r0.to_region().area() == pytest.approx(r0.area(), rel=0.01)
    assert r0.circumference() == pytest.approx(23.013, rel=1e-3)

def test_line_roi():
    r0 = roi.LineRoi(x1=0, y1=0, x2=6, y2=3)
    assert r0.length() == pytest.approx(math.sqrt(6**2 + 3**2))
    assert r0.degree() == pytest.approx(math.degrees(math.atan(3 / 6)))
    assert r0.start() == Point2D(0, 0)
    assert r0.end() == Point2D(6, 3)
    assert not r0.is_area()
    assert not r0.contains(3, 1.5)
    with pytest.raises(TypeError):
        r0.to_region()

def test_points_roi():
    r0 = roi.PointsRoi(xs=[1.4, 2.3], ys=[2.3, 1.4])
    assert len(r0) == 2
    assert r0.xs.dtype == np.float64
    assert r0.points() == [Point2D(1.4, 2.3), Point2D(2.3, 1.4)]
    assert r0.bbox() == Rect(1.4, 1.4, pytest.approx(0.9), pytest.approx(0.9))
    r1 = roi.PointsRoi.from_points([(0, 1), (2, 3)])
    assert_allclose(r1.xs, [0, 2])
    assert_allclose(r1.ys, [1, 3])
    assert roi.PointsRoi(xs=[], ys=[]).is_empty()

def test_points_roi_validation():
    with pytest.raises(ValidationError):
        roi.PointsRoi(xs=[0, 1, 2], ys=[0, 1])
    with pytest.raises(ValidationError):
        roi.PointsRoi(xs=["a", "b"], ys=[0, 1])
    with pytest.raises(ValidationError):
        roi.PointsRoi(xs=[[0, 1]], ys=[[0, 1]])

def test_polyline_and_polygon_roi():
    r0 = roi.PolylineRoi(xs=[0, 1.6, 1.6], ys=[0, 0, 2])
    assert r0.length() == pytest.approx(3.6)
    assert not r0.is_area()
    r1 = roi.PolygonRoi(xs=[0, 4, 4, 0], ys=[0, 0, 3, 3])
    assert r1.length() == pytest.approx(14)
    assert r1.area() == pytest.approx(12)
    assert r1.contains(1, 1)
    assert not r1.contains(5, 1)
    assert r1.to_region().area() == pytest.approx(12)

def test_area_roi(square_with_hole_and_island):
    r0 = roi.AreaRoi(region=square_with_hole_and_island)
    assert r0.area() == pytest.approx(100 * 100 - 40 * 40 + 50 * 50)
    assert r0.bbox() == Rect(0, 0, 200, 100)
    assert r0.contains(10, 10)
    assert not r0.contains(50, 50)
    assert r0.contains(175, 25)
    assert not r0.contains(125, 25)
    assert r0.shifted(10, 0).contains(185, 25)
    assert roi.AreaRoi().is_empty()

def test_rois_are_frozen():
    r0 = roi.RectangleRoi(x=2, y=3, width=4, height=5)
    with pytest.raises(ValidationError):
        r0.x = 5

def test_plane_index():
    assert PlaneIndex.default() == PlaneIndex(c=-1, z=0, t=0)
    assert PlaneIndex.with_channel(2, z=1).matches(PlaneIndex(c=2, z=1))
    assert PlaneIndex(c=-1, z=1).matches(PlaneIndex(c=3, z=1))
    assert not PlaneIndex(c=1).matches(PlaneIndex(c=2))
    assert not PlaneIndex(t=1).matches(PlaneIndex(t=2))
    with pytest.raises(ValidationError):
        PlaneIndex(c=-2)
    r0 = roi.LineRoi(x1=0, y1=0, x2=1, y2=1)
    assert r0.plane == PlaneIndex.default()
    assert r0.with_plane(PlaneIndex(c=1, z=2, t=3)).plane == PlaneIndex(c=1, z=2, t=3)

def test_roi_type_names():
    assert roi.roi_type_name(roi.RectangleRoi) == "rectangle"
    assert roi.pick_roi_model("polygon") is roi.PolygonRoi
    assert roi.pick_roi_model("area") is roi.AreaRoi
    with pytest.raises(ValueError):
        roi.pick_roi_model("not-a-roi")

def test_serialize_typed(source_rois):
    for r0 in source_rois:
        typed = r0.model_dump_typed()
        typ = typed.pop("type")
        r1 = roi.RoiModel.construct(typ, typed)
        assert type(r1) is type(r0)
        assert r1.name == r0.name
        assert r1.bbox() == r0.bbox()

def test_roi_list_json(source_rois):
    rois = roi.RoiListModel(rois=source_rois)
    assert len(rois) == len(source_rois)
    rois_new = roi.RoiListModel.model_validate_json(rois.model_dump_json())
    assert [type(r) for r in rois_new] == [type(r) for r in source_rois]
    assert_allclose(rois_new[5].xs, source_rois[5].xs)
    assert rois_new[6].region.equals(source_rois[6].region)
    rois_new = roi.RoiListModel.construct(rois.model_dump_typed())
    assert isinstance(rois_new[0], roi.RectangleRoi)
    with pytest.raises(ValidationError):
        roi.RoiListModel(rois=[1])
    with pytest.raises(ValidationError):
        roi.RoiListModel(rois=[{"x": 0, "y": 0, "width": 1, "height": 1}])
    with pytest.raises(ValidationError):
        roi.RoiListModel.model_validate_json('{"rois": [{"x1": 0}]}')

def test_roi_list_filter_plane():
    rois = roi.RoiListModel(
        rois=[
            roi.RectangleRoi(x=0, y=0, width=1, height=1, name="all"),
            roi.RectangleRoi(
                x=0, y=0, width=1, height=1, name="c1", plane=PlaneIndex(c=1)
            ),
            roi.RectangleRoi(
                x=0, y=0, width=1, height=1, name="c2", plane=PlaneIndex(c=2)
            ),
            roi.RectangleRoi(
                x=0, y=0, width=1, height=1, name="z1", plane=PlaneIndex(c=1, z=1)
            ),
        ]
    )
    assert [r.name for r in rois.filter_plane(PlaneIndex(c=1))] == ["all", "c1"]
    assert [r.name for r in rois.filter_plane(PlaneIndex())] == ["all", "c1", "c2"]
    assert [r.name for r in rois.filter_plane(PlaneIndex(z=1))] == ["z1"]

def test_region_from_contours():
    region = PlanarRegion.from_contours(
        [
            Contour(
                [[0, 0], [100, 0], [100, 100], [0, 100], [0, 0]],
                ([[30, 30], [70, 30], [70, 70], [30, 70]],),
            )
        ]
    )
    assert len(region) == 1
    assert region.area() == pytest.approx(8400)
    (contour,) = region.contours()
    assert contour.exterior.shape == (4, 2)
    assert len(contour.holes) == 1
    assert len(list(region.iter_rings())) == 2

def test_region_from_rings_even_odd():
    outer = [[0, 0], [10, 0], [10, 10], [0, 10]]
    inner = [[2, 2], [8, 2], [8, 8], [2, 8]]
    innermost = [[4, 4], [6, 4], [6, 6], [4, 6]]
    region = PlanarRegion.from_rings([outer, inner, innermost])
    assert region.area() == pytest.approx(100 - 36 + 4)
    assert region.contains(1, 1)
    assert not region.contains(3, 3)
    assert region.contains(5, 5)
    assert_array_equal(
        region.contains_points([1, 3, 5, 20], [1, 3, 5, 20]),
        [True, False, True, False],
    )

def test_region_drops_degenerate_rings():
    region = PlanarRegion.from_rings([[[0, 0], [1, 1]], [[0, 0], [1, 0], [0, 1]]])
    assert region.area() == pytest.approx(0.5)
    line_only = PlanarRegion.from_rings([[[0, 0], [1, 1], [2, 2]]])
    assert line_only.is_empty()

def test_region_transform(square_with_hole_and_island):
    region = square_with_hole_and_island.transformed((0.5, 0, 0, 0.5, 10, 20))
    assert region.bbox() == Rect(10, 20, 100, 50)
    assert region.area() == pytest.approx(square_with_hole_and_island.area() / 4)
    back = region.transformed((2, 0, 0, 2, -20, -40))
    assert back.equals(square_with_hole_and_island)

def test_region_list(square_with_hole_and_island):
    data = square_with_hole_and_island.to_list()
    assert len(data) == 2
    region = PlanarRegion.from_list(data)
    assert region.equals(square_with_hole_and_island)

def test_region_ellipse():
    region = PlanarRegion.from_ellipse(Rect(0, 0, 20, 10))
    assert region.area() == pytest.approx(math.pi * 10 * 5, rel=0.01)
    assert PlanarRegion.from_ellipse(Rect(0, 0, 0, 10)).is_empty()

def test_region_keeps_near_closing_vertex_at_large_coordinates():
    ring = [[1e5, 1e5], [100100, 1e5], [100100, 100100], [1e5, 100000.9]]
    region = PlanarRegion.from_contours([Contour(ring)])
    assert region.contains(100010, 100010.4)
    assert region.area() == pytest.approx(5045)
    region = PlanarRegion.from_rings([ring + [ring[0]]])
    assert region.area() == pytest.approx(5045)
