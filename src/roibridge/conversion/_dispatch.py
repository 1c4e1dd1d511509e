from __future__ import annotations

from functools import singledispatch
import logging
from typing import Callable, TYPE_CHECKING
from roibridge.conversion import _forward, _reverse
from roibridge.conversion._validate import resolve_context
from roibridge.exceptions import UnsupportedShapeKind
from roibridge.standards import roi
from roibridge.toolkit import (
    Line,
    OvalRoi,
    PointRoi,
    PolygonRoi,
    Roi,
    RoiType,
    ShapeRoi,
    ToolkitRoi,
    type_name,
)
from roibridge.types import PlaneIndex

if TYPE_CHECKING:
    from roibridge.geometry import CoordinateContext

_LOGGER = logging.getLogger(__name__)


@singledispatch
def _forward_converter(r: roi.RoiModel) -> Callable:
    raise UnsupportedShapeKind(type(r).__name__)


@_forward_converter.register
def _(r: roi.RectangleRoi):
    return _forward.rectangle_to_toolkit


@_forward_converter.register
def _(r: roi.EllipseRoi):
    return _forward.ellipse_to_toolkit


@_forward_converter.register
def _(r: roi.LineRoi):
    return _forward.line_to_toolkit


@_forward_converter.register
def _(r: roi.PointsRoi):
    return _forward.points_to_toolkit_roi


@_forward_converter.register
def _(r: roi.PolylineRoi):
    return _forward.polyline_to_toolkit


@_forward_converter.register
def _(r: roi.PolygonRoi):
    return _forward.polygon_to_toolkit


@_forward_converter.register
def _(r: roi.AreaRoi):
    return _forward.area_to_toolkit


def to_toolkit_roi(
    r: roi.Roi2D,
    context: CoordinateContext | None = None,
) -> ToolkitRoi | None:
    """Convert a source ROI into a toolkit ROI.

    Parameters
    ----------
    r : Roi2D
        The ROI to convert.
    context : CoordinateContext, optional
        Origin and downsample factor of the toolkit image. Use
        ``CoordinateContext.from_image`` to derive it from a calibrated image.

    Returns
    -------
    ToolkitRoi or None
        The converted ROI, or None if the ROI has no geometry (such as an empty point
        list or an empty area).
    """
    ctx = resolve_context(context)
    out = _forward_converter(r)(r, ctx)
    _LOGGER.debug("Converted %s to %r with %r", type(r).__name__, out, ctx)
    return out


def to_source_roi(
    r: ToolkitRoi,
    context: CoordinateContext | None = None,
    plane: PlaneIndex | None = None,
) -> roi.Roi2D | None:
    """Convert a toolkit ROI into a source ROI.

    The kind of the output is decided by the explicit type tag first, then by whether
    the toolkit ROI encloses an area, and then by whether it is a line. Rounded
    rectangles and freehand or traced polygons are therefore converted to areas, and
    segmented or freehand lines to polylines.

    Parameters
    ----------
    r : ToolkitRoi
        The ROI to convert.
    context : CoordinateContext, optional
        Origin and downsample factor of the toolkit image.
    plane : PlaneIndex, optional
        The plane of the output ROI. All channels of the first plane by default.

    Returns
    -------
    Roi2D or None
        The converted ROI, or None if the ROI has no geometry.
    """
    ctx = resolve_context(context)
    if plane is None:
        plane = PlaneIndex.default()
    match r:
        case Roi(type=RoiType.RECTANGLE, corner_diameter=0):
            out = _reverse.rectangle_from_toolkit(r, ctx, plane)
        case OvalRoi(type=RoiType.OVAL):
            out = _reverse.ellipse_from_toolkit(r, ctx, plane)
        case Line(type=RoiType.LINE):
            out = _reverse.line_from_toolkit(r, ctx, plane)
        case PointRoi(type=RoiType.POINT):
            out = _reverse.points_from_toolkit(r, ctx, plane)
        case PolygonRoi(type=RoiType.POLYGON):
            out = _reverse.polygon_from_toolkit(r, ctx, plane)
        case ShapeRoi(type=RoiType.COMPOSITE):
            out = _reverse.area_from_toolkit(r, ctx, plane)
        case ToolkitRoi() if r.is_area():
            out = _reverse.area_from_toolkit(r, ctx, plane)
        case PolygonRoi() if r.is_line():
            out = _reverse.polyline_from_toolkit(r, ctx, plane)
        case ToolkitRoi():
            raise UnsupportedShapeKind(f"{type(r).__name__}<{type_name(r.type)}>")
        case _:
            raise UnsupportedShapeKind(type(r).__name__)
    _LOGGER.debug("Converted %r to %s with %r", r, type(out).__name__, ctx)
    return out
