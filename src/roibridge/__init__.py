__version__ = "0.1.0"

from roibridge.conversion import to_source_roi, to_toolkit_roi
from roibridge.exceptions import (
    InvalidContext,
    MalformedGeometry,
    RoiConversionError,
    UnsupportedShapeKind,
)
from roibridge.geometry import CoordinateContext, PlanarRegion
from roibridge.types import PlaneIndex, Point2D, Rect

__all__ = [
    "to_source_roi",
    "to_toolkit_roi",
    "CoordinateContext",
    "PlanarRegion",
    "PlaneIndex",
    "Point2D",
    "Rect",
    "RoiConversionError",
    "InvalidContext",
    "MalformedGeometry",
    "UnsupportedShapeKind",
]
