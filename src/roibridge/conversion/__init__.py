"""Conversion between source ROIs and toolkit ROIs."""

from roibridge.conversion._dispatch import to_source_roi, to_toolkit_roi

__all__ = ["to_source_roi", "to_toolkit_roi"]
