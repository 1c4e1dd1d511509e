"""ROI object model of the image-processing toolkit."""

from roibridge.toolkit._base import UNKNOWN_TYPE, RoiType, ToolkitRoi, type_name
from roibridge.toolkit.core import Line, OvalRoi, PointRoi, PolygonRoi, Roi, ShapeRoi

__all__ = [
    "RoiType",
    "UNKNOWN_TYPE",
    "ToolkitRoi",
    "type_name",
    "Roi",
    "OvalRoi",
    "Line",
    "PolygonRoi",
    "PointRoi",
    "ShapeRoi",
]
