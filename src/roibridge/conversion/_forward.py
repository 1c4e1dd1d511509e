"""Converters from source ROIs to toolkit ROIs."""

from __future__ import annotations

from roibridge.conversion._validate import (
    check_bounds,
    check_finite,
    check_finite_array,
)
from roibridge.geometry import (
    CoordinateContext,
    bounds_to_toolkit,
    points_to_toolkit,
    to_toolkit,
)
from roibridge.standards import roi
from roibridge import toolkit as tk
from roibridge.toolkit import _path


def rectangle_to_toolkit(r: roi.RectangleRoi, ctx: CoordinateContext) -> tk.Roi:
    check_bounds("Rectangle", r.bbox())
    bounds = bounds_to_toolkit(r.bbox(), ctx)
    return tk.Roi(*bounds, name=r.name)


def ellipse_to_toolkit(r: roi.EllipseRoi, ctx: CoordinateContext) -> tk.OvalRoi:
    check_bounds("Ellipse", r.bbox())
    bounds = bounds_to_toolkit(r.bbox(), ctx)
    return tk.OvalRoi(*bounds, name=r.name)


def line_to_toolkit(r: roi.LineRoi, ctx: CoordinateContext) -> tk.Line:
    check_finite("Line", r.x1, r.y1, r.x2, r.y2)
    return tk.Line(
        to_toolkit(r.x1, ctx.origin_x, ctx.downsample),
        to_toolkit(r.y1, ctx.origin_y, ctx.downsample),
        to_toolkit(r.x2, ctx.origin_x, ctx.downsample),
        to_toolkit(r.y2, ctx.origin_y, ctx.downsample),
        name=r.name,
    )


def points_to_toolkit_roi(
    r: roi.PointsRoi, ctx: CoordinateContext
) -> tk.PointRoi | None:
    if r.is_empty():
        return None
    check_finite_array("Points", r.xs, r.ys)
    xs, ys = points_to_toolkit(r.xs, r.ys, ctx)
    return tk.PointRoi(xs, ys, name=r.name)


def polyline_to_toolkit(
    r: roi.PolylineRoi, ctx: CoordinateContext
) -> tk.PolygonRoi | None:
    if r.is_empty():
        return None
    check_finite_array("Polyline", r.xs, r.ys)
    xs, ys = points_to_toolkit(r.xs, r.ys, ctx)
    return tk.PolygonRoi(xs, ys, type=tk.RoiType.POLYLINE, name=r.name)


def polygon_to_toolkit(
    r: roi.PolygonRoi, ctx: CoordinateContext
) -> tk.PolygonRoi | None:
    if r.is_empty():
        return None
    check_finite_array("Polygon", r.xs, r.ys)
    xs, ys = points_to_toolkit(r.xs, r.ys, ctx)
    return tk.PolygonRoi(xs, ys, type=tk.RoiType.POLYGON, name=r.name)


def area_to_toolkit(r: roi.AreaRoi, ctx: CoordinateContext) -> tk.ShapeRoi | None:
    """Convert an area into a shape ROI, keeping every contour and hole."""
    if r.is_empty():
        return None
    check_bounds("Area", r.bbox())
    region = r.region.transformed(ctx.affine_to_toolkit())
    path = _path.path_from_rings(region.iter_rings())
    return tk.ShapeRoi(path, name=r.name)
