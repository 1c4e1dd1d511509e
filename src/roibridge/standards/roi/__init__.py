"""Standard ROI (Region of Interest) classes for images."""

from roibridge.standards.roi._base import (
    RoiModel,
    Roi2D,
    pick_roi_model,
    roi_type_name,
)

from roibridge.standards.roi.core import (
    RectangleRoi,
    EllipseRoi,
    LineRoi,
    PointsRoi,
    PolylineRoi,
    PolygonRoi,
    AreaRoi,
)
from roibridge.standards.roi._list import RoiListModel

__all__ = [
    "RoiModel",
    "Roi2D",
    "RectangleRoi",
    "EllipseRoi",
    "LineRoi",
    "PointsRoi",
    "PolylineRoi",
    "PolygonRoi",
    "AreaRoi",
    "RoiListModel",
    "pick_roi_model",
    "roi_type_name",
]
