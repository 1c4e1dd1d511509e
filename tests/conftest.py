import pytest
from roibridge.geometry import Contour, PlanarRegion
from roibridge.standards import roi


@pytest.fixture
def square_with_hole_and_island() -> PlanarRegion:
    return PlanarRegion.from_contours(
        [
            Contour(
                [[0, 0], [100, 0], [100, 100], [0, 100]],
                ([[30, 30], [70, 30], [70, 70], [30, 70]],),
            ),
            Contour([[150, 0], [200, 0], [200, 50], [150, 50]]),
        ]
    )


@pytest.fixture
def source_rois(square_with_hole_and_island):
    return [
        roi.RectangleRoi(x=10, y=20, width=100, height=50),
        roi.EllipseRoi(x=2, y=3, width=40, height=12),
        roi.LineRoi(x1=0, y1=0, x2=10, y2=10),
        roi.PointsRoi(xs=[1.5, 4.0, 2.25], ys=[3.0, 1.0, 8.5]),
        roi.PolylineRoi(xs=[0, 1.6, 1.6], ys=[0, 0, 2]),
        roi.PolygonRoi(xs=[0, 10.5, 7.25, 1], ys=[0, 0.5, 9, 4]),
        roi.AreaRoi(region=square_with_hole_and_island),
    ]
