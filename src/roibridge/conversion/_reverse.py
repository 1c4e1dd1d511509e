"""Converters from toolkit ROIs to source ROIs."""

from __future__ import annotations

import logging
from roibridge.conversion._validate import (
    check_bounds,
    check_finite,
    check_finite_array,
)
from roibridge.geometry import (
    CoordinateContext,
    PlanarRegion,
    bounds_to_source,
    points_to_source,
    to_source,
)
from roibridge.standards import roi
from roibridge import toolkit as tk
from roibridge.toolkit import _path
from roibridge.types import PlaneIndex

_LOGGER = logging.getLogger(__name__)


def rectangle_from_toolkit(
    r: tk.Roi, ctx: CoordinateContext, plane: PlaneIndex
) -> roi.RectangleRoi:
    check_bounds("Rectangle", r.bounds())
    bounds = bounds_to_source(r.bounds(), ctx)
    return roi.RectangleRoi(
        x=bounds.left,
        y=bounds.top,
        width=bounds.width,
        height=bounds.height,
        plane=plane,
        name=r.name,
    )


def ellipse_from_toolkit(
    r: tk.OvalRoi, ctx: CoordinateContext, plane: PlaneIndex
) -> roi.EllipseRoi:
    check_bounds("Oval", r.bounds())
    bounds = bounds_to_source(r.bounds(), ctx)
    return roi.EllipseRoi(
        x=bounds.left,
        y=bounds.top,
        width=bounds.width,
        height=bounds.height,
        plane=plane,
        name=r.name,
    )


def line_from_toolkit(
    r: tk.Line, ctx: CoordinateContext, plane: PlaneIndex
) -> roi.LineRoi:
    check_finite("Line", r.x1d, r.y1d, r.x2d, r.y2d)
    return roi.LineRoi(
        x1=to_source(r.x1d, ctx.origin_x, ctx.downsample),
        y1=to_source(r.y1d, ctx.origin_y, ctx.downsample),
        x2=to_source(r.x2d, ctx.origin_x, ctx.downsample),
        y2=to_source(r.y2d, ctx.origin_y, ctx.downsample),
        plane=plane,
        name=r.name,
    )


def _points_from_float_polygon(
    r: tk.PolygonRoi,
    ctx: CoordinateContext,
    plane: PlaneIndex,
    roi_class: type[roi.PointsRoi],
) -> roi.PointsRoi | None:
    xs, ys = r.float_polygon()
    if xs.size == 0:
        return None
    check_finite_array(tk.type_name(r.type).capitalize(), xs, ys)
    xs, ys = points_to_source(xs, ys, ctx)
    return roi_class(xs=xs, ys=ys, plane=plane, name=r.name)


def points_from_toolkit(
    r: tk.PointRoi, ctx: CoordinateContext, plane: PlaneIndex
) -> roi.PointsRoi | None:
    return _points_from_float_polygon(r, ctx, plane, roi.PointsRoi)


def polygon_from_toolkit(
    r: tk.PolygonRoi, ctx: CoordinateContext, plane: PlaneIndex
) -> roi.PolygonRoi | None:
    return _points_from_float_polygon(r, ctx, plane, roi.PolygonRoi)


def polyline_from_toolkit(
    r: tk.PolygonRoi, ctx: CoordinateContext, plane: PlaneIndex
) -> roi.PolylineRoi | None:
    return _points_from_float_polygon(r, ctx, plane, roi.PolylineRoi)


def area_from_toolkit(
    r: tk.ToolkitRoi, ctx: CoordinateContext, plane: PlaneIndex
) -> roi.AreaRoi | None:
    """Convert any area-like toolkit ROI into an area ROI.

    The shape is scaled by the downsample factor after being moved by its base and
    by the negative origin, then the region is rebuilt from its rings with the
    even-odd rule.
    """
    check_bounds(tk.type_name(r.type).capitalize(), r.bounds())
    shape = r.to_shape()
    check_finite_array("Shape", shape.shape().vertices)
    check_bounds("Shape", shape.bounds())
    path = _path.transform_path(
        shape.shape(), ctx.affine_to_source(shape.x_base, shape.y_base)
    )
    rings = _path.rings_from_path(path)
    if not rings:
        return None
    region = PlanarRegion.from_rings(rings)
    if region.is_empty():
        _LOGGER.warning("Shape of %r encloses no area.", r)
        return None
    return roi.AreaRoi(region=region, plane=plane, name=r.name)
