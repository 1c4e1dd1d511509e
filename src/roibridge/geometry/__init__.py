"""Coordinate mapping and planar region geometry."""

from roibridge.geometry._mapper import (
    CoordinateContext,
    ImageHandle,
    to_toolkit,
    to_source,
    points_to_toolkit,
    points_to_source,
    bounds_to_toolkit,
    bounds_to_source,
)
from roibridge.geometry._region import Contour, PlanarRegion

__all__ = [
    "CoordinateContext",
    "ImageHandle",
    "to_toolkit",
    "to_source",
    "points_to_toolkit",
    "points_to_source",
    "bounds_to_toolkit",
    "bounds_to_source",
    "Contour",
    "PlanarRegion",
]
